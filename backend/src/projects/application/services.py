import logging
from uuid import UUID

from activity.application.recorder import ActivityRecorder
from activity.domain.entities import ActivityAction, ResourceType
from auth.domain.repository import UserRepository
from projects.application.membership import MembershipRegistry
from projects.domain.entities import MemberRole, Project, ProjectMembership
from projects.domain.repository import ProjectRepository
from shared.exceptions import AuthorizationError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


async def create_project(
    repo: ProjectRepository,
    recorder: ActivityRecorder,
    name: str,
    owner_id: UUID,
    description: str = "",
) -> Project:
    if not name.strip():
        raise ValidationError("Project name must not be empty")

    project = await repo.create(
        Project(name=name.strip(), owner_id=owner_id, description=description)
    )
    logger.info("Created project %s for %s", project.id, owner_id)
    await recorder.record(
        project.id, owner_id, ActivityAction.CREATED, ResourceType.PROJECT, project.id
    )
    return project


async def get_project(
    repo: ProjectRepository,
    registry: MembershipRegistry,
    project_id: UUID,
    caller_id: UUID,
) -> Project:
    project = await repo.get_by_id(project_id)
    if not project:
        raise NotFoundError("Project", str(project_id))
    await registry.require_member(project_id, caller_id)
    return project


async def list_owned_projects(repo: ProjectRepository, caller_id: UUID) -> list[Project]:
    return await repo.list_by_owner(caller_id)


async def list_shared_projects(repo: ProjectRepository, caller_id: UUID) -> list[Project]:
    return await repo.list_by_member(caller_id)


async def add_project_member(
    repo: ProjectRepository,
    registry: MembershipRegistry,
    users: UserRepository,
    recorder: ActivityRecorder,
    project_id: UUID,
    caller_id: UUID,
    email: str,
    role: MemberRole = MemberRole.EDITOR,
) -> ProjectMembership:
    project = await repo.get_by_id(project_id)
    if not project:
        raise NotFoundError("Project", str(project_id))
    if project.owner_id != caller_id:
        raise AuthorizationError("Only the project owner can add members")

    user = await users.get_by_email(email)
    if not user:
        raise NotFoundError("User", email)
    if user.id == project.owner_id:
        raise ValidationError("The project owner is already a member")

    membership = await registry.add_member(project_id, user.id, role)
    await recorder.record(
        project_id, caller_id, ActivityAction.JOINED, ResourceType.MEMBER, user.id
    )
    return membership
