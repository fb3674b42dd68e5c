import logging
from uuid import UUID

from projects.domain.entities import MemberRole, ProjectMembership
from projects.domain.repository import MembershipRepository, ProjectRepository
from shared.exceptions import AuthorizationError, NotFoundError

logger = logging.getLogger(__name__)


class MembershipRegistry:
    """Answers whether a user may access a project.

    The owner is a member by virtue of ``Project.owner_id`` and never gets a
    membership row, so ``members`` only enumerates the explicit rows.
    """

    def __init__(self, projects: ProjectRepository, memberships: MembershipRepository):
        self.projects = projects
        self.memberships = memberships

    async def is_member(self, project_id: UUID, user_id: UUID) -> bool:
        project = await self.projects.get_by_id(project_id)
        if not project:
            return False
        if project.owner_id == user_id:
            return True
        return await self.memberships.get(project_id, user_id) is not None

    async def members(self, project_id: UUID) -> set[UUID]:
        return {m.user_id for m in await self.list_memberships(project_id)}

    async def list_memberships(self, project_id: UUID) -> list[ProjectMembership]:
        return await self.memberships.list_by_project(project_id)

    async def require_member(self, project_id: UUID, user_id: UUID) -> None:
        if not await self.projects.get_by_id(project_id):
            raise NotFoundError("Project", str(project_id))
        if not await self.is_member(project_id, user_id):
            raise AuthorizationError("Not a member of this project")

    async def add_member(
        self,
        project_id: UUID,
        user_id: UUID,
        role: MemberRole = MemberRole.EDITOR,
    ) -> ProjectMembership:
        existing = await self.memberships.get(project_id, user_id)
        if existing:
            return existing
        membership = await self.memberships.create(
            ProjectMembership(project_id=project_id, user_id=user_id, role=role)
        )
        logger.info("Added user %s to project %s as %s", user_id, project_id, role.value)
        return membership
