from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, EmailStr

from projects.domain.entities import MemberRole


class CreateProjectRequest(BaseModel):
    name: str
    description: str = ""


class ProjectResponse(BaseModel):
    id: UUID
    owner_id: UUID
    name: str
    description: str
    created_at: datetime | None = None


class AddMemberRequest(BaseModel):
    email: EmailStr
    role: MemberRole = MemberRole.EDITOR


class MemberResponse(BaseModel):
    project_id: UUID
    user_id: UUID
    role: MemberRole
    created_at: datetime | None = None
