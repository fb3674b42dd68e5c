import logging
from uuid import UUID

from documents.domain.entities import Version
from documents.domain.repository import DocumentRepository, VersionRepository
from shared.exceptions import NotFoundError, StaleBaseError

logger = logging.getLogger(__name__)


class VersionStore:
    """Append-only ledger of content snapshots per document.

    ``commit`` counts the existing versions and inserts ``count + 1``. The two
    steps are not atomic; a concurrent commit that computed the same number is
    rejected by the unique (document_id, version_number) constraint and
    surfaces as ``StoreError``.
    """

    def __init__(self, documents: DocumentRepository, versions: VersionRepository):
        self.documents = documents
        self.versions = versions

    async def latest(self, document_id: UUID) -> Version | None:
        return await self.versions.get_latest(document_id)

    async def history(self, document_id: UUID) -> list[Version]:
        return await self.versions.list_newest_first(document_id)

    async def commit(
        self,
        document_id: UUID,
        content: str,
        author_id: UUID,
        expected_base: int | None = None,
    ) -> Version:
        """Persist ``content`` as the next version.

        With ``expected_base`` set, the commit is refused with
        ``StaleBaseError`` when another writer has advanced the document past
        that version number.
        """
        if not await self.documents.get_by_id(document_id):
            raise NotFoundError("Document", str(document_id))

        existing = await self.versions.count(document_id)
        if expected_base is not None and existing != expected_base:
            raise StaleBaseError(expected=expected_base, actual=existing)

        version = await self.versions.add(
            Version(
                document_id=document_id,
                version_number=existing + 1,
                content=content,
                author_id=author_id,
            )
        )
        logger.info(
            "Committed version %d of document %s by %s",
            version.version_number,
            document_id,
            author_id,
        )
        return version

    async def restore_to_buffer(self, document_id: UUID, version_number: int) -> str:
        """Return the content of an old version. Nothing is written."""
        version = await self.versions.get_by_number(document_id, version_number)
        if not version:
            raise NotFoundError("Version", f"{document_id}@{version_number}")
        return version.content
