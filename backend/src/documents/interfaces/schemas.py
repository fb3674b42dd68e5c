from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from documents.domain.entities import DocumentType


class CreateDocumentRequest(BaseModel):
    name: str
    type: DocumentType = DocumentType.DOCUMENT


class DocumentResponse(BaseModel):
    id: UUID
    project_id: UUID
    name: str
    type: DocumentType
    created_by: UUID
    created_at: datetime | None = None


class CommitVersionRequest(BaseModel):
    content: str
    # Version number the client's buffer was loaded from; enables the stale check.
    expected_base: int | None = None


class VersionResponse(BaseModel):
    id: int
    document_id: UUID
    version_number: int
    content: str
    author_id: UUID
    created_at: datetime | None = None


class VersionSummaryResponse(BaseModel):
    version_number: int
    author_id: UUID
    created_at: datetime | None = None


class RestoredContentResponse(BaseModel):
    document_id: UUID
    version_number: int
    content: str


class CreateCommentRequest(BaseModel):
    text: str


class CommentResponse(BaseModel):
    id: int
    document_id: UUID
    author_id: UUID
    content: str
    created_at: datetime | None = None
