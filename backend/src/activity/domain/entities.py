from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from uuid import UUID


class ActivityAction(StrEnum):
    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"
    COMMENTED = "commented"
    JOINED = "joined"


class ResourceType(StrEnum):
    PROJECT = "project"
    DOCUMENT = "document"
    MEMBER = "member"


@dataclass(frozen=True)
class ActivityRecord:
    project_id: UUID
    user_id: UUID
    action: ActivityAction
    resource_type: ResourceType
    resource_id: str
    id: int | None = field(default=None)
    created_at: datetime | None = field(default=None)
