import asyncio
import logging
from enum import StrEnum
from uuid import UUID

from activity.application.recorder import ActivityRecorder
from documents.application.comment_thread import CommentThread
from documents.application.services import (
    add_comment,
    delete_document,
    get_document,
    save_content,
)
from documents.application.version_store import VersionStore
from documents.domain.entities import Comment, Document, Version
from documents.domain.repository import DocumentRepository
from projects.application.membership import MembershipRegistry
from shared.exceptions import InvalidStateError

logger = logging.getLogger(__name__)


class SessionState(StrEnum):
    UNLOADED = "unloaded"
    CLEAN = "clean"
    DIRTY = "dirty"
    CLOSED = "closed"


class DocumentSession:
    """One editor's view of one document.

    The buffer is seeded from the latest version on ``open`` and only becomes
    a version on ``save``. Staging an old version replaces the buffer and
    always leaves the session dirty, even when the content is unchanged, so a
    restore followed by a save is never silently dropped.

    ``base_version`` is the version number the buffer was last synced with.
    It is sent as the expected base on save only when ``strict`` is set;
    otherwise the last writer wins.
    """

    def __init__(
        self,
        documents: DocumentRepository,
        store: VersionStore,
        thread: CommentThread,
        registry: MembershipRegistry,
        recorder: ActivityRecorder,
        strict: bool = False,
    ):
        self.documents = documents
        self.store = store
        self.thread = thread
        self.registry = registry
        self.recorder = recorder
        self.strict = strict

        self.state = SessionState.UNLOADED
        self.document: Document | None = None
        self.buffer = ""
        self.base_version = 0
        self._save_lock = asyncio.Lock()

    @property
    def is_dirty(self) -> bool:
        return self.state == SessionState.DIRTY

    async def open(self, document_id: UUID, caller_id: UUID) -> str:
        if self.state != SessionState.UNLOADED:
            raise InvalidStateError(f"Cannot open a session that is {self.state.value}")

        document = await get_document(self.documents, self.registry, document_id, caller_id)
        latest = await self.store.latest(document_id)

        self.document = document
        self.buffer = latest.content if latest else ""
        self.base_version = latest.version_number if latest else 0
        self.state = SessionState.CLEAN
        return self.buffer

    def edit(self, content: str) -> None:
        self._require_loaded("edit")
        self.buffer = content
        self.state = SessionState.DIRTY

    async def save(self, caller_id: UUID) -> Version:
        self._require_loaded("save")
        if self._save_lock.locked():
            raise InvalidStateError("A save is already in progress for this session")

        async with self._save_lock:
            content = self.buffer
            version = await save_content(
                self.store,
                self.recorder,
                self.document,
                content,
                caller_id,
                expected_base=self.base_version if self.strict else None,
            )
            self.base_version = version.version_number
            # Edits made while the save was in flight keep the session dirty.
            self.state = SessionState.CLEAN if self.buffer == content else SessionState.DIRTY
            return version

    async def stage_version(self, version_number: int) -> str:
        self._require_loaded("stage a version")
        content = await self.store.restore_to_buffer(self.document.id, version_number)
        self.buffer = content
        self.state = SessionState.DIRTY
        return content

    async def history(self) -> list[Version]:
        self._require_loaded("list history")
        return await self.store.history(self.document.id)

    async def comments(self) -> list[Comment]:
        self._require_loaded("list comments")
        return await self.thread.list(self.document.id)

    async def add_comment(self, caller_id: UUID, text: str) -> Comment:
        self._require_loaded("comment")
        return await add_comment(self.thread, self.recorder, self.document, caller_id, text)

    async def delete(self, caller_id: UUID) -> None:
        self._require_loaded("delete")
        await delete_document(
            self.documents, self.registry, self.recorder, self.document.id, caller_id
        )
        self.close()

    def close(self) -> None:
        if self.state == SessionState.CLOSED:
            return
        if self.state == SessionState.DIRTY:
            logger.info("Closing document %s with unsaved changes", self.document.id)
        self.state = SessionState.CLOSED

    def _require_loaded(self, action: str) -> None:
        if self.state in (SessionState.UNLOADED, SessionState.CLOSED):
            raise InvalidStateError(f"Cannot {action}: session is {self.state.value}")
