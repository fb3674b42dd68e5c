from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from activity.domain.entities import ActivityAction, ActivityRecord, ResourceType
from activity.infrastructure.models import ActivityLogModel
from shared.infrastructure.database import store_operation


class DbActivityRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def append(self, record: ActivityRecord) -> ActivityRecord:
        model = ActivityLogModel(
            project_id=record.project_id,
            user_id=record.user_id,
            action=record.action.value,
            resource_type=record.resource_type.value,
            resource_id=record.resource_id,
        )
        async with store_operation(self.session, "recording activity"):
            self.session.add(model)
            await self.session.commit()
            await self.session.refresh(model)
        return _to_entity(model)

    async def list_recent(self, project_id: UUID, limit: int) -> list[ActivityRecord]:
        async with store_operation(self.session, "loading activity"):
            result = await self.session.execute(
                select(ActivityLogModel)
                .where(ActivityLogModel.project_id == project_id)
                .order_by(ActivityLogModel.created_at.desc(), ActivityLogModel.id.desc())
                .limit(limit)
            )
            models = result.scalars().all()
        return [_to_entity(m) for m in models]


def _to_entity(model: ActivityLogModel) -> ActivityRecord:
    return ActivityRecord(
        id=model.id,
        project_id=model.project_id,
        user_id=model.user_id,
        action=ActivityAction(model.action),
        resource_type=ResourceType(model.resource_type),
        resource_id=model.resource_id,
        created_at=model.created_at,
    )
