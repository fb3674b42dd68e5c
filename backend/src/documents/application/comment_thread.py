from uuid import UUID

from documents.domain.entities import Comment
from documents.domain.repository import CommentRepository, DocumentRepository
from shared.exceptions import NotFoundError, ValidationError


class CommentThread:
    """Flat, append-only comments on a whole document (not on a version)."""

    def __init__(self, documents: DocumentRepository, comments: CommentRepository):
        self.documents = documents
        self.comments = comments

    async def list(self, document_id: UUID) -> list[Comment]:
        return await self.comments.list_newest_first(document_id)

    async def append(self, document_id: UUID, author_id: UUID, text: str) -> Comment:
        if not text.strip():
            raise ValidationError("Comment text must not be empty")
        if not await self.documents.get_by_id(document_id):
            raise NotFoundError("Document", str(document_id))

        return await self.comments.add(
            Comment(document_id=document_id, author_id=author_id, content=text)
        )
