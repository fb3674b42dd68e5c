from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from activity.domain.entities import ActivityAction, ResourceType


class ActivityResponse(BaseModel):
    id: int
    project_id: UUID
    user_id: UUID
    action: ActivityAction
    resource_type: ResourceType
    resource_id: str
    created_at: datetime | None = None
