from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from uuid import UUID


class DocumentType(StrEnum):
    DOCUMENT = "document"
    SPREADSHEET = "spreadsheet"
    PRESENTATION = "presentation"


@dataclass
class Document:
    project_id: UUID
    name: str
    created_by: UUID
    type: DocumentType = DocumentType.DOCUMENT
    id: UUID | None = field(default=None)
    created_at: datetime | None = field(default=None)


@dataclass(frozen=True)
class Version:
    """An immutable content snapshot. Numbers start at 1 and are never reused."""

    document_id: UUID
    version_number: int
    content: str
    author_id: UUID
    id: int | None = field(default=None)
    created_at: datetime | None = field(default=None)


@dataclass(frozen=True)
class Comment:
    document_id: UUID
    author_id: UUID
    content: str
    id: int | None = field(default=None)
    created_at: datetime | None = field(default=None)
