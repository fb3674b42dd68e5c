from uuid import uuid4

import pytest

from shared.exceptions import NotFoundError, ValidationError


async def test_empty_thread(workspace, doc):
    assert await workspace.thread.list(doc.id) == []


async def test_append_and_list_newest_first(workspace, user, other_user, doc):
    first = await workspace.thread.append(doc.id, user.id, "Looks good")
    second = await workspace.thread.append(doc.id, other_user.id, "Typo in line 2")

    comments = await workspace.thread.list(doc.id)
    assert [c.id for c in comments] == [second.id, first.id]
    assert comments[0].author_id == other_user.id
    assert comments[1].content == "Looks good"


@pytest.mark.parametrize("text", ["", "   ", "\n\t "])
async def test_blank_comment_rejected(workspace, user, doc, text):
    await workspace.thread.append(doc.id, user.id, "existing")
    with pytest.raises(ValidationError):
        await workspace.thread.append(doc.id, user.id, text)
    assert len(await workspace.thread.list(doc.id)) == 1


async def test_comments_are_independent_of_versions(workspace, user, doc):
    await workspace.thread.append(doc.id, user.id, "before any save")
    await workspace.store.commit(doc.id, "v1", user.id)
    await workspace.thread.append(doc.id, user.id, "after save")

    assert len(await workspace.thread.list(doc.id)) == 2


async def test_comment_on_missing_document(workspace, user):
    with pytest.raises(NotFoundError):
        await workspace.thread.append(uuid4(), user.id, "hello")
