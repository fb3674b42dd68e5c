from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from auth.domain.entities import User
from auth.infrastructure.models import UserModel
from shared.exceptions import ConflictError
from shared.infrastructure.database import store_operation


class DbUserRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, user_id: UUID) -> User | None:
        async with store_operation(self.session, "loading user"):
            result = await self.session.execute(
                select(UserModel).where(UserModel.id == user_id)
            )
            model = result.scalar_one_or_none()
        return _to_entity(model) if model else None

    async def get_by_email(self, email: str) -> User | None:
        async with store_operation(self.session, "looking up user"):
            result = await self.session.execute(
                select(UserModel).where(UserModel.email == email.lower())
            )
            model = result.scalar_one_or_none()
        return _to_entity(model) if model else None

    async def create(self, user: User) -> User:
        model = UserModel(
            email=user.email.lower(),
            full_name=user.full_name,
            password_hash=user.password_hash,
        )
        async with store_operation(self.session, "creating user"):
            self.session.add(model)
            try:
                await self.session.commit()
            except IntegrityError:
                # Lost a race with a concurrent registration for the same email.
                await self.session.rollback()
                raise ConflictError("Email already registered")
            await self.session.refresh(model)
        return _to_entity(model)


def _to_entity(model: UserModel) -> User:
    return User(
        id=model.id,
        email=model.email,
        full_name=model.full_name,
        password_hash=model.password_hash,
        created_at=model.created_at,
    )
