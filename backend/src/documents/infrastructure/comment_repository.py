from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from documents.domain.entities import Comment
from documents.infrastructure.models import CommentModel
from shared.infrastructure.database import store_operation


class DbCommentRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_newest_first(self, document_id: UUID) -> list[Comment]:
        async with store_operation(self.session, "loading comments"):
            result = await self.session.execute(
                select(CommentModel)
                .where(CommentModel.document_id == document_id)
                .order_by(CommentModel.created_at.desc(), CommentModel.id.desc())
            )
            models = result.scalars().all()
        return [_to_entity(m) for m in models]

    async def add(self, comment: Comment) -> Comment:
        model = CommentModel(
            document_id=comment.document_id,
            author_id=comment.author_id,
            content=comment.content,
        )
        async with store_operation(self.session, "adding comment"):
            self.session.add(model)
            await self.session.commit()
            await self.session.refresh(model)
        return _to_entity(model)


def _to_entity(model: CommentModel) -> Comment:
    return Comment(
        id=model.id,
        document_id=model.document_id,
        author_id=model.author_id,
        content=model.content,
        created_at=model.created_at,
    )
