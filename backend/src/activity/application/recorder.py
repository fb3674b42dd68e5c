import logging
from uuid import UUID

from activity.domain.entities import ActivityAction, ActivityRecord, ResourceType
from activity.domain.repository import ActivityRepository
from shared.config import settings

logger = logging.getLogger(__name__)


class ActivityRecorder:
    """Best-effort audit trail of who did what in a project.

    ``record`` never raises: the primary write it accompanies has already
    succeeded, so a failure here is logged and dropped.
    """

    def __init__(self, repo: ActivityRepository):
        self.repo = repo

    async def record(
        self,
        project_id: UUID,
        user_id: UUID,
        action: ActivityAction,
        resource_type: ResourceType,
        resource_id: UUID | int | str,
    ) -> ActivityRecord | None:
        entry = ActivityRecord(
            project_id=project_id,
            user_id=user_id,
            action=action,
            resource_type=resource_type,
            resource_id=str(resource_id),
        )
        try:
            return await self.repo.append(entry)
        except Exception:
            logger.warning(
                "Dropped activity %s %s:%s in project %s",
                action.value,
                resource_type.value,
                resource_id,
                project_id,
                exc_info=True,
            )
            return None

    async def recent(self, project_id: UUID, limit: int | None = None) -> list[ActivityRecord]:
        return await self.repo.list_recent(project_id, limit or settings.ACTIVITY_RECENT_LIMIT)
