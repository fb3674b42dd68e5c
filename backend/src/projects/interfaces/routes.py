from uuid import UUID

from fastapi import APIRouter, Depends

from auth.domain.entities import User
from projects.application.services import (
    add_project_member,
    create_project,
    get_project,
    list_owned_projects,
    list_shared_projects,
)
from projects.interfaces.schemas import (
    AddMemberRequest,
    CreateProjectRequest,
    MemberResponse,
    ProjectResponse,
)
from shared.dependencies import Workspace, get_current_user, get_workspace

router = APIRouter(prefix="/api/projects", tags=["projects"])


@router.post("/", response_model=ProjectResponse, status_code=201)
async def create(
    body: CreateProjectRequest,
    current_user: User = Depends(get_current_user),
    ws: Workspace = Depends(get_workspace),
):
    return await create_project(
        ws.projects,
        ws.recorder,
        name=body.name,
        owner_id=current_user.id,
        description=body.description,
    )


@router.get("/", response_model=list[ProjectResponse])
async def list_owned(
    current_user: User = Depends(get_current_user),
    ws: Workspace = Depends(get_workspace),
):
    return await list_owned_projects(ws.projects, current_user.id)


@router.get("/shared", response_model=list[ProjectResponse])
async def list_shared(
    current_user: User = Depends(get_current_user),
    ws: Workspace = Depends(get_workspace),
):
    return await list_shared_projects(ws.projects, current_user.id)


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_one(
    project_id: UUID,
    current_user: User = Depends(get_current_user),
    ws: Workspace = Depends(get_workspace),
):
    return await get_project(ws.projects, ws.registry, project_id, current_user.id)


@router.get("/{project_id}/members", response_model=list[MemberResponse])
async def list_members(
    project_id: UUID,
    current_user: User = Depends(get_current_user),
    ws: Workspace = Depends(get_workspace),
):
    await ws.registry.require_member(project_id, current_user.id)
    return await ws.registry.list_memberships(project_id)


@router.post("/{project_id}/members", response_model=MemberResponse, status_code=201)
async def add_member(
    project_id: UUID,
    body: AddMemberRequest,
    current_user: User = Depends(get_current_user),
    ws: Workspace = Depends(get_workspace),
):
    return await add_project_member(
        ws.projects,
        ws.registry,
        ws.users,
        ws.recorder,
        project_id=project_id,
        caller_id=current_user.id,
        email=body.email,
        role=body.role,
    )
