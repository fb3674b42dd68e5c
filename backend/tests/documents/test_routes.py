from uuid import uuid4

from sqlalchemy.ext.asyncio import AsyncSession

from conftest import create_user_and_get_headers, fail_statements


async def _project_with_document(client, headers):
    project = (await client.post("/api/projects/", json={"name": "Handbook"}, headers=headers)).json()
    resp = await client.post(
        f"/api/projects/{project['id']}/documents",
        json={"name": "Onboarding", "type": "document"},
        headers=headers,
    )
    assert resp.status_code == 201
    return project, resp.json()


async def test_create_document(client, auth_headers):
    project, doc = await _project_with_document(client, auth_headers)
    assert doc["name"] == "Onboarding"
    assert doc["type"] == "document"
    assert doc["project_id"] == project["id"]


async def test_create_document_validation(client, auth_headers):
    project, _ = await _project_with_document(client, auth_headers)
    resp = await client.post(
        f"/api/projects/{project['id']}/documents",
        json={"name": "   "},
        headers=auth_headers,
    )
    assert resp.status_code == 422

    resp = await client.post(
        f"/api/projects/{project['id']}/documents",
        json={"name": "Slides", "type": "video"},
        headers=auth_headers,
    )
    assert resp.status_code == 422


async def test_list_documents(client, auth_headers):
    project, doc = await _project_with_document(client, auth_headers)
    resp = await client.get(f"/api/projects/{project['id']}/documents", headers=auth_headers)
    assert resp.status_code == 200
    assert [d["id"] for d in resp.json()] == [doc["id"]]


async def test_get_document_not_found(client, auth_headers):
    resp = await client.get(f"/api/documents/{uuid4()}", headers=auth_headers)
    assert resp.status_code == 404


async def test_version_lifecycle(client, auth_headers):
    _, doc = await _project_with_document(client, auth_headers)
    base = f"/api/documents/{doc['id']}/versions"

    assert (await client.get(f"{base}/latest", headers=auth_headers)).status_code == 404
    assert (await client.get(base, headers=auth_headers)).json() == []

    resp = await client.post(base, json={"content": "hello"}, headers=auth_headers)
    assert resp.status_code == 201
    assert resp.json()["version_number"] == 1

    resp = await client.post(base, json={"content": "hello world"}, headers=auth_headers)
    assert resp.json()["version_number"] == 2

    history = (await client.get(base, headers=auth_headers)).json()
    assert [v["version_number"] for v in history] == [2, 1]

    latest = (await client.get(f"{base}/latest", headers=auth_headers)).json()
    assert latest["content"] == "hello world"

    restored = (await client.get(f"{base}/1", headers=auth_headers)).json()
    assert restored == {"document_id": doc["id"], "version_number": 1, "content": "hello"}
    assert len((await client.get(base, headers=auth_headers)).json()) == 2


async def test_restore_missing_version(client, auth_headers):
    _, doc = await _project_with_document(client, auth_headers)
    resp = await client.get(f"/api/documents/{doc['id']}/versions/3", headers=auth_headers)
    assert resp.status_code == 404


async def test_stale_commit_conflict(client, auth_headers):
    _, doc = await _project_with_document(client, auth_headers)
    base = f"/api/documents/{doc['id']}/versions"
    await client.post(base, json={"content": "a", "expected_base": 0}, headers=auth_headers)

    resp = await client.post(base, json={"content": "b", "expected_base": 0}, headers=auth_headers)
    assert resp.status_code == 409


async def test_comments(client, auth_headers):
    _, doc = await _project_with_document(client, auth_headers)
    base = f"/api/documents/{doc['id']}/comments"

    resp = await client.post(base, json={"text": "First!"}, headers=auth_headers)
    assert resp.status_code == 201
    assert resp.json()["content"] == "First!"

    resp = await client.post(base, json={"text": "  "}, headers=auth_headers)
    assert resp.status_code == 422

    comments = (await client.get(base, headers=auth_headers)).json()
    assert [c["content"] for c in comments] == ["First!"]


async def test_delete_document_cascades(client, auth_headers):
    _, doc = await _project_with_document(client, auth_headers)
    for content in ["1", "2", "3"]:
        await client.post(
            f"/api/documents/{doc['id']}/versions", json={"content": content}, headers=auth_headers
        )
    for text in ["a", "b"]:
        await client.post(
            f"/api/documents/{doc['id']}/comments", json={"text": text}, headers=auth_headers
        )

    resp = await client.delete(f"/api/documents/{doc['id']}", headers=auth_headers)
    assert resp.status_code == 204

    resp = await client.get(f"/api/documents/{doc['id']}/versions", headers=auth_headers)
    assert resp.status_code == 404
    resp = await client.get(f"/api/documents/{doc['id']}/comments", headers=auth_headers)
    assert resp.status_code == 404


async def test_non_member_cannot_touch_document(client, auth_headers):
    _, doc = await _project_with_document(client, auth_headers)
    other_headers = await create_user_and_get_headers(client, suffix="2")

    resp = await client.post(
        f"/api/documents/{doc['id']}/versions", json={"content": "x"}, headers=other_headers
    )
    assert resp.status_code == 403
    resp = await client.delete(f"/api/documents/{doc['id']}", headers=other_headers)
    assert resp.status_code == 403


async def test_activity_feed(client, auth_headers):
    project, doc = await _project_with_document(client, auth_headers)
    await client.post(
        f"/api/documents/{doc['id']}/versions", json={"content": "x"}, headers=auth_headers
    )
    await client.post(
        f"/api/documents/{doc['id']}/comments", json={"text": "y"}, headers=auth_headers
    )

    resp = await client.get(f"/api/projects/{project['id']}/activity", headers=auth_headers)
    assert resp.status_code == 200
    actions = [(a["action"], a["resource_type"]) for a in resp.json()]
    assert actions == [
        ("commented", "document"),
        ("updated", "document"),
        ("created", "document"),
        ("created", "project"),
    ]


async def test_documents_require_auth(client):
    resp = await client.get(f"/api/documents/{uuid4()}")
    assert resp.status_code in (401, 403)


async def test_store_outage_is_503(client, auth_headers, monkeypatch):
    _, doc = await _project_with_document(client, auth_headers)
    fail_statements(monkeypatch, AsyncSession)

    resp = await client.get(f"/api/documents/{doc['id']}/versions", headers=auth_headers)
    assert resp.status_code == 503
    assert resp.json()["detail"].startswith("Storage failure while")
