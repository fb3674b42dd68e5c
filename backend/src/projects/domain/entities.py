from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from uuid import UUID


class MemberRole(StrEnum):
    EDITOR = "editor"
    VIEWER = "viewer"


@dataclass
class Project:
    name: str
    owner_id: UUID
    description: str = ""
    id: UUID | None = field(default=None)
    created_at: datetime | None = field(default=None)


@dataclass
class ProjectMembership:
    project_id: UUID
    user_id: UUID
    role: MemberRole = MemberRole.EDITOR
    id: int | None = field(default=None)
    created_at: datetime | None = field(default=None)
