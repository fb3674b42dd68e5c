from typing import Protocol
from uuid import UUID

from activity.domain.entities import ActivityRecord


class ActivityRepository(Protocol):
    async def append(self, record: ActivityRecord) -> ActivityRecord: ...

    async def list_recent(self, project_id: UUID, limit: int) -> list[ActivityRecord]: ...
