from typing import Protocol
from uuid import UUID

from documents.domain.entities import Comment, Document, Version


class DocumentRepository(Protocol):
    async def get_by_id(self, document_id: UUID) -> Document | None: ...

    async def list_by_project(self, project_id: UUID) -> list[Document]: ...

    async def create(self, document: Document) -> Document: ...

    async def delete_cascade(self, document_id: UUID) -> bool: ...


class VersionRepository(Protocol):
    async def count(self, document_id: UUID) -> int: ...

    async def get_latest(self, document_id: UUID) -> Version | None: ...

    async def get_by_number(self, document_id: UUID, version_number: int) -> Version | None: ...

    async def list_newest_first(self, document_id: UUID) -> list[Version]: ...

    async def add(self, version: Version) -> Version: ...


class CommentRepository(Protocol):
    async def list_newest_first(self, document_id: UUID) -> list[Comment]: ...

    async def add(self, comment: Comment) -> Comment: ...
