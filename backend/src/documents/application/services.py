import logging
from uuid import UUID

from activity.application.recorder import ActivityRecorder
from activity.domain.entities import ActivityAction, ResourceType
from documents.application.comment_thread import CommentThread
from documents.application.version_store import VersionStore
from documents.domain.entities import Comment, Document, DocumentType, Version
from documents.domain.repository import DocumentRepository
from projects.application.membership import MembershipRegistry
from shared.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


async def create_document(
    repo: DocumentRepository,
    registry: MembershipRegistry,
    recorder: ActivityRecorder,
    project_id: UUID,
    name: str,
    caller_id: UUID,
    type: DocumentType = DocumentType.DOCUMENT,
) -> Document:
    """Create an empty document. It has no versions until the first save."""
    if not name.strip():
        raise ValidationError("Document name must not be empty")
    await registry.require_member(project_id, caller_id)

    doc = await repo.create(
        Document(project_id=project_id, name=name.strip(), type=type, created_by=caller_id)
    )
    await recorder.record(
        project_id, caller_id, ActivityAction.CREATED, ResourceType.DOCUMENT, doc.id
    )
    return doc


async def get_document(
    repo: DocumentRepository,
    registry: MembershipRegistry,
    document_id: UUID,
    caller_id: UUID,
) -> Document:
    doc = await repo.get_by_id(document_id)
    if not doc:
        raise NotFoundError("Document", str(document_id))
    await registry.require_member(doc.project_id, caller_id)
    return doc


async def list_documents(
    repo: DocumentRepository,
    registry: MembershipRegistry,
    project_id: UUID,
    caller_id: UUID,
) -> list[Document]:
    await registry.require_member(project_id, caller_id)
    return await repo.list_by_project(project_id)


async def delete_document(
    repo: DocumentRepository,
    registry: MembershipRegistry,
    recorder: ActivityRecorder,
    document_id: UUID,
    caller_id: UUID,
) -> None:
    doc = await get_document(repo, registry, document_id, caller_id)
    if not await repo.delete_cascade(document_id):
        raise NotFoundError("Document", str(document_id))
    logger.info("Deleted document %s with its versions and comments", document_id)
    await recorder.record(
        doc.project_id, caller_id, ActivityAction.DELETED, ResourceType.DOCUMENT, document_id
    )


async def save_content(
    store: VersionStore,
    recorder: ActivityRecorder,
    document: Document,
    content: str,
    caller_id: UUID,
    expected_base: int | None = None,
) -> Version:
    """Commit a new version, then log the edit.

    The activity entry is written separately and may be lost; the version
    never is.
    """
    version = await store.commit(document.id, content, caller_id, expected_base=expected_base)
    await recorder.record(
        document.project_id, caller_id, ActivityAction.UPDATED, ResourceType.DOCUMENT, document.id
    )
    return version


async def add_comment(
    thread: CommentThread,
    recorder: ActivityRecorder,
    document: Document,
    caller_id: UUID,
    text: str,
) -> Comment:
    comment = await thread.append(document.id, caller_id, text)
    await recorder.record(
        document.project_id, caller_id, ActivityAction.COMMENTED, ResourceType.DOCUMENT, document.id
    )
    return comment
