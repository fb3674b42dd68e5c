from uuid import UUID

from fastapi import APIRouter, Depends, Query

from activity.interfaces.schemas import ActivityResponse
from auth.domain.entities import User
from shared.dependencies import Workspace, get_current_user, get_workspace

router = APIRouter(prefix="/api/projects", tags=["activity"])


@router.get("/{project_id}/activity", response_model=list[ActivityResponse])
async def recent_activity(
    project_id: UUID,
    limit: int | None = Query(default=None, ge=1, le=500),
    current_user: User = Depends(get_current_user),
    ws: Workspace = Depends(get_workspace),
):
    await ws.registry.require_member(project_id, current_user.id)
    return await ws.recorder.recent(project_id, limit)
