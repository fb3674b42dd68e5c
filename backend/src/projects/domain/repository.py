from typing import Protocol
from uuid import UUID

from projects.domain.entities import Project, ProjectMembership


class ProjectRepository(Protocol):
    async def get_by_id(self, project_id: UUID) -> Project | None: ...

    async def list_by_owner(self, owner_id: UUID) -> list[Project]: ...

    async def list_by_member(self, user_id: UUID) -> list[Project]: ...

    async def create(self, project: Project) -> Project: ...


class MembershipRepository(Protocol):
    async def get(self, project_id: UUID, user_id: UUID) -> ProjectMembership | None: ...

    async def list_by_project(self, project_id: UUID) -> list[ProjectMembership]: ...

    async def create(self, membership: ProjectMembership) -> ProjectMembership: ...
