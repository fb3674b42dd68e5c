from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from documents.domain.entities import Version
from documents.infrastructure.models import VersionModel
from shared.infrastructure.database import store_operation


class DbVersionRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def count(self, document_id: UUID) -> int:
        async with store_operation(self.session, "counting versions"):
            result = await self.session.execute(
                select(func.count())
                .select_from(VersionModel)
                .where(VersionModel.document_id == document_id)
            )
            return result.scalar_one()

    async def get_latest(self, document_id: UUID) -> Version | None:
        async with store_operation(self.session, "loading latest version"):
            result = await self.session.execute(
                select(VersionModel)
                .where(VersionModel.document_id == document_id)
                .order_by(VersionModel.version_number.desc())
                .limit(1)
            )
            model = result.scalar_one_or_none()
        return _to_entity(model) if model else None

    async def get_by_number(self, document_id: UUID, version_number: int) -> Version | None:
        async with store_operation(self.session, "loading version"):
            result = await self.session.execute(
                select(VersionModel).where(
                    VersionModel.document_id == document_id,
                    VersionModel.version_number == version_number,
                )
            )
            model = result.scalar_one_or_none()
        return _to_entity(model) if model else None

    async def list_newest_first(self, document_id: UUID) -> list[Version]:
        async with store_operation(self.session, "loading version history"):
            result = await self.session.execute(
                select(VersionModel)
                .where(VersionModel.document_id == document_id)
                .order_by(VersionModel.version_number.desc(), VersionModel.created_at.desc())
            )
            models = result.scalars().all()
        return [_to_entity(m) for m in models]

    async def add(self, version: Version) -> Version:
        model = VersionModel(
            document_id=version.document_id,
            version_number=version.version_number,
            content=version.content,
            author_id=version.author_id,
        )
        async with store_operation(self.session, "committing version"):
            self.session.add(model)
            await self.session.commit()
            await self.session.refresh(model)
        return _to_entity(model)


def _to_entity(model: VersionModel) -> Version:
    return Version(
        id=model.id,
        document_id=model.document_id,
        version_number=model.version_number,
        content=model.content,
        author_id=model.author_id,
        created_at=model.created_at,
    )
