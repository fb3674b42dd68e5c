import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from shared.config import settings
from shared.exceptions import StoreError

logger = logging.getLogger(__name__)

engine = create_async_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO, pool_pre_ping=True)

async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


class Base(DeclarativeBase):
    pass


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@asynccontextmanager
async def store_operation(session: AsyncSession, action: str) -> AsyncIterator[None]:
    """Roll back and re-raise persistence failures as StoreError."""
    try:
        yield
    except IntegrityError as exc:
        await session.rollback()
        logger.warning("Constraint violation while %s: %s", action, exc.orig)
        raise StoreError(f"Conflicting write while {action}") from exc
    except SQLAlchemyError as exc:
        await session.rollback()
        logger.error("Store failure while %s", action, exc_info=True)
        raise StoreError(f"Storage failure while {action}") from exc
