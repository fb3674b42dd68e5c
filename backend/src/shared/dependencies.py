from collections.abc import AsyncGenerator
from dataclasses import dataclass

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from activity.application.recorder import ActivityRecorder
from activity.infrastructure.activity_repository import DbActivityRepository
from auth.application.services import verify_token
from auth.infrastructure.user_repository import DbUserRepository
from documents.application.comment_thread import CommentThread
from documents.application.session import DocumentSession
from documents.application.version_store import VersionStore
from documents.infrastructure.comment_repository import DbCommentRepository
from documents.infrastructure.document_repository import DbDocumentRepository
from documents.infrastructure.version_repository import DbVersionRepository
from projects.application.membership import MembershipRegistry
from projects.infrastructure.project_repository import (
    DbMembershipRepository,
    DbProjectRepository,
)
from shared.config import settings
from shared.infrastructure.database import async_session

security = HTTPBearer()


@dataclass
class Workspace:
    """Repositories and core components bound to one database session."""

    users: DbUserRepository
    projects: DbProjectRepository
    documents: DbDocumentRepository
    registry: MembershipRegistry
    store: VersionStore
    thread: CommentThread
    recorder: ActivityRecorder

    def new_session(self) -> DocumentSession:
        return DocumentSession(
            self.documents,
            self.store,
            self.thread,
            self.registry,
            self.recorder,
            strict=settings.STRICT_VERSION_CHECK,
        )


def build_workspace(db: AsyncSession) -> Workspace:
    projects = DbProjectRepository(db)
    documents = DbDocumentRepository(db)
    return Workspace(
        users=DbUserRepository(db),
        projects=projects,
        documents=documents,
        registry=MembershipRegistry(projects, DbMembershipRepository(db)),
        store=VersionStore(documents, DbVersionRepository(db)),
        thread=CommentThread(documents, DbCommentRepository(db)),
        recorder=ActivityRecorder(DbActivityRepository(db)),
    )


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async with async_session() as session:
        yield session


async def get_workspace(db: AsyncSession = Depends(get_db)) -> Workspace:
    return build_workspace(db)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    db: AsyncSession = Depends(get_db),
):
    repo = DbUserRepository(db)
    return await verify_token(repo, credentials.credentials)
