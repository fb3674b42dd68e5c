import logging
from uuid import uuid4

from activity.application.recorder import ActivityRecorder
from activity.domain.entities import ActivityAction, ResourceType
from activity.infrastructure.activity_repository import DbActivityRepository
from shared.exceptions import StoreError


class BrokenRepository:
    async def append(self, record):
        raise StoreError("activity log unavailable")

    async def list_recent(self, project_id, limit):
        return []


async def test_record_and_read_back(db, user):
    recorder = ActivityRecorder(DbActivityRepository(db))
    project_id = uuid4()
    document_id = uuid4()

    record = await recorder.record(
        project_id, user.id, ActivityAction.UPDATED, ResourceType.DOCUMENT, document_id
    )
    assert record.id is not None
    assert record.resource_id == str(document_id)

    recent = await recorder.recent(project_id)
    assert [(r.action, r.resource_type) for r in recent] == [
        (ActivityAction.UPDATED, ResourceType.DOCUMENT)
    ]


async def test_recent_is_newest_first_and_limited(db, user):
    recorder = ActivityRecorder(DbActivityRepository(db))
    project_id = uuid4()
    for action in [ActivityAction.CREATED, ActivityAction.UPDATED, ActivityAction.COMMENTED]:
        await recorder.record(project_id, user.id, action, ResourceType.DOCUMENT, "doc")

    recent = await recorder.recent(project_id, limit=2)
    assert [r.action for r in recent] == [ActivityAction.COMMENTED, ActivityAction.UPDATED]


async def test_recent_is_scoped_to_project(db, user):
    recorder = ActivityRecorder(DbActivityRepository(db))
    await recorder.record(uuid4(), user.id, ActivityAction.CREATED, ResourceType.PROJECT, "p")
    assert await recorder.recent(uuid4()) == []


async def test_record_failure_is_swallowed(caplog):
    recorder = ActivityRecorder(BrokenRepository())

    with caplog.at_level(logging.WARNING, logger="activity.application.recorder"):
        result = await recorder.record(
            uuid4(), uuid4(), ActivityAction.UPDATED, ResourceType.DOCUMENT, uuid4()
        )

    assert result is None
    assert "Dropped activity updated" in caplog.text
