from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from documents.domain.entities import Document, DocumentType
from documents.infrastructure.models import CommentModel, DocumentModel, VersionModel
from shared.infrastructure.database import store_operation


class DbDocumentRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, document_id: UUID) -> Document | None:
        async with store_operation(self.session, "loading document"):
            result = await self.session.execute(
                select(DocumentModel).where(DocumentModel.id == document_id)
            )
            model = result.scalar_one_or_none()
        return _to_entity(model) if model else None

    async def list_by_project(self, project_id: UUID) -> list[Document]:
        async with store_operation(self.session, "listing documents"):
            result = await self.session.execute(
                select(DocumentModel)
                .where(DocumentModel.project_id == project_id)
                .order_by(DocumentModel.created_at.desc())
            )
            models = result.scalars().all()
        return [_to_entity(m) for m in models]

    async def create(self, document: Document) -> Document:
        model = DocumentModel(
            project_id=document.project_id,
            name=document.name,
            type=document.type.value,
            created_by=document.created_by,
        )
        async with store_operation(self.session, "creating document"):
            self.session.add(model)
            await self.session.commit()
            await self.session.refresh(model)
        return _to_entity(model)

    async def delete_cascade(self, document_id: UUID) -> bool:
        """Delete versions and comments, then the document, in one transaction."""
        async with store_operation(self.session, "deleting document"):
            await self.session.execute(
                delete(VersionModel).where(VersionModel.document_id == document_id)
            )
            await self.session.execute(
                delete(CommentModel).where(CommentModel.document_id == document_id)
            )
            result = await self.session.execute(
                delete(DocumentModel).where(DocumentModel.id == document_id)
            )
            await self.session.commit()
        return result.rowcount > 0


def _to_entity(model: DocumentModel) -> Document:
    return Document(
        id=model.id,
        project_id=model.project_id,
        name=model.name,
        type=DocumentType(model.type),
        created_by=model.created_by,
        created_at=model.created_at,
    )
