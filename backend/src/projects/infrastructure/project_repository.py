from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from projects.domain.entities import MemberRole, Project, ProjectMembership
from projects.infrastructure.models import ProjectMemberModel, ProjectModel
from shared.infrastructure.database import store_operation


class DbProjectRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, project_id: UUID) -> Project | None:
        async with store_operation(self.session, "loading project"):
            result = await self.session.execute(
                select(ProjectModel).where(ProjectModel.id == project_id)
            )
            model = result.scalar_one_or_none()
        return _project_to_entity(model) if model else None

    async def list_by_owner(self, owner_id: UUID) -> list[Project]:
        async with store_operation(self.session, "listing owned projects"):
            result = await self.session.execute(
                select(ProjectModel)
                .where(ProjectModel.owner_id == owner_id)
                .order_by(ProjectModel.created_at.desc())
            )
            models = result.scalars().all()
        return [_project_to_entity(m) for m in models]

    async def list_by_member(self, user_id: UUID) -> list[Project]:
        async with store_operation(self.session, "listing shared projects"):
            result = await self.session.execute(
                select(ProjectModel)
                .join(ProjectMemberModel, ProjectMemberModel.project_id == ProjectModel.id)
                .where(ProjectMemberModel.user_id == user_id)
                .order_by(ProjectModel.created_at.desc())
            )
            models = result.scalars().all()
        return [_project_to_entity(m) for m in models]

    async def create(self, project: Project) -> Project:
        model = ProjectModel(
            owner_id=project.owner_id,
            name=project.name,
            description=project.description,
        )
        async with store_operation(self.session, "creating project"):
            self.session.add(model)
            await self.session.commit()
            await self.session.refresh(model)
        return _project_to_entity(model)


class DbMembershipRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, project_id: UUID, user_id: UUID) -> ProjectMembership | None:
        async with store_operation(self.session, "loading project member"):
            result = await self.session.execute(
                select(ProjectMemberModel).where(
                    ProjectMemberModel.project_id == project_id,
                    ProjectMemberModel.user_id == user_id,
                )
            )
            model = result.scalar_one_or_none()
        return _membership_to_entity(model) if model else None

    async def list_by_project(self, project_id: UUID) -> list[ProjectMembership]:
        async with store_operation(self.session, "listing project members"):
            result = await self.session.execute(
                select(ProjectMemberModel)
                .where(ProjectMemberModel.project_id == project_id)
                .order_by(ProjectMemberModel.id.asc())
            )
            models = result.scalars().all()
        return [_membership_to_entity(m) for m in models]

    async def create(self, membership: ProjectMembership) -> ProjectMembership:
        model = ProjectMemberModel(
            project_id=membership.project_id,
            user_id=membership.user_id,
            role=membership.role.value,
        )
        async with store_operation(self.session, "adding project member"):
            self.session.add(model)
            await self.session.commit()
            await self.session.refresh(model)
        return _membership_to_entity(model)


def _project_to_entity(model: ProjectModel) -> Project:
    return Project(
        id=model.id,
        owner_id=model.owner_id,
        name=model.name,
        description=model.description,
        created_at=model.created_at,
    )


def _membership_to_entity(model: ProjectMemberModel) -> ProjectMembership:
    return ProjectMembership(
        id=model.id,
        project_id=model.project_id,
        user_id=model.user_id,
        role=MemberRole(model.role),
        created_at=model.created_at,
    )
