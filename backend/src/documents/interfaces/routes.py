from uuid import UUID

from fastapi import APIRouter, Depends

from auth.domain.entities import User
from documents.application.services import (
    add_comment,
    create_document,
    delete_document,
    get_document,
    list_documents,
    save_content,
)
from documents.interfaces.schemas import (
    CommentResponse,
    CommitVersionRequest,
    CreateCommentRequest,
    CreateDocumentRequest,
    DocumentResponse,
    RestoredContentResponse,
    VersionResponse,
    VersionSummaryResponse,
)
from shared.dependencies import Workspace, get_current_user, get_workspace
from shared.exceptions import NotFoundError

router = APIRouter(tags=["documents"])


@router.post(
    "/api/projects/{project_id}/documents",
    response_model=DocumentResponse,
    status_code=201,
)
async def create(
    project_id: UUID,
    body: CreateDocumentRequest,
    current_user: User = Depends(get_current_user),
    ws: Workspace = Depends(get_workspace),
):
    return await create_document(
        ws.documents,
        ws.registry,
        ws.recorder,
        project_id=project_id,
        name=body.name,
        caller_id=current_user.id,
        type=body.type,
    )


@router.get("/api/projects/{project_id}/documents", response_model=list[DocumentResponse])
async def list_for_project(
    project_id: UUID,
    current_user: User = Depends(get_current_user),
    ws: Workspace = Depends(get_workspace),
):
    return await list_documents(ws.documents, ws.registry, project_id, current_user.id)


@router.get("/api/documents/{document_id}", response_model=DocumentResponse)
async def get_one(
    document_id: UUID,
    current_user: User = Depends(get_current_user),
    ws: Workspace = Depends(get_workspace),
):
    return await get_document(ws.documents, ws.registry, document_id, current_user.id)


@router.delete("/api/documents/{document_id}", status_code=204)
async def delete(
    document_id: UUID,
    current_user: User = Depends(get_current_user),
    ws: Workspace = Depends(get_workspace),
):
    await delete_document(ws.documents, ws.registry, ws.recorder, document_id, current_user.id)


@router.get(
    "/api/documents/{document_id}/versions",
    response_model=list[VersionSummaryResponse],
)
async def history(
    document_id: UUID,
    current_user: User = Depends(get_current_user),
    ws: Workspace = Depends(get_workspace),
):
    await get_document(ws.documents, ws.registry, document_id, current_user.id)
    return await ws.store.history(document_id)


@router.get("/api/documents/{document_id}/versions/latest", response_model=VersionResponse)
async def latest(
    document_id: UUID,
    current_user: User = Depends(get_current_user),
    ws: Workspace = Depends(get_workspace),
):
    await get_document(ws.documents, ws.registry, document_id, current_user.id)
    version = await ws.store.latest(document_id)
    if not version:
        raise NotFoundError("Version", f"{document_id}@latest")
    return version


@router.post(
    "/api/documents/{document_id}/versions",
    response_model=VersionResponse,
    status_code=201,
)
async def commit(
    document_id: UUID,
    body: CommitVersionRequest,
    current_user: User = Depends(get_current_user),
    ws: Workspace = Depends(get_workspace),
):
    doc = await get_document(ws.documents, ws.registry, document_id, current_user.id)
    return await save_content(
        ws.store,
        ws.recorder,
        doc,
        body.content,
        current_user.id,
        expected_base=body.expected_base,
    )


@router.get(
    "/api/documents/{document_id}/versions/{version_number}",
    response_model=RestoredContentResponse,
)
async def restore(
    document_id: UUID,
    version_number: int,
    current_user: User = Depends(get_current_user),
    ws: Workspace = Depends(get_workspace),
):
    await get_document(ws.documents, ws.registry, document_id, current_user.id)
    content = await ws.store.restore_to_buffer(document_id, version_number)
    return RestoredContentResponse(
        document_id=document_id, version_number=version_number, content=content
    )


@router.get("/api/documents/{document_id}/comments", response_model=list[CommentResponse])
async def list_comments(
    document_id: UUID,
    current_user: User = Depends(get_current_user),
    ws: Workspace = Depends(get_workspace),
):
    await get_document(ws.documents, ws.registry, document_id, current_user.id)
    return await ws.thread.list(document_id)


@router.post(
    "/api/documents/{document_id}/comments",
    response_model=CommentResponse,
    status_code=201,
)
async def create_comment(
    document_id: UUID,
    body: CreateCommentRequest,
    current_user: User = Depends(get_current_user),
    ws: Workspace = Depends(get_workspace),
):
    doc = await get_document(ws.documents, ws.registry, document_id, current_user.id)
    return await add_comment(ws.thread, ws.recorder, doc, current_user.id, body.text)
