"""Seed script — creates demo users, a shared project and versioned documents via the REST API.

Usage:
    python scripts/seed.py              # uses http://localhost:8000
    python scripts/seed.py http://host  # custom base URL
"""

import sys

import httpx

BASE_URL = sys.argv[1] if len(sys.argv) > 1 else "http://localhost:8000"

USERS = [
    {"email": "alice@example.com", "full_name": "Alice Smith", "password": "password123"},
    {"email": "bob@example.com", "full_name": "Bob Jones", "password": "password123"},
]

PROJECT = {"name": "Team Handbook", "description": "Shared onboarding material"}

DOCUMENTS = [
    {
        "name": "Getting Started Guide",
        "type": "document",
        "revisions": ["# Getting started", "# Getting started\n\nInstall the tools first."],
    },
    {"name": "Quarterly Budget", "type": "spreadsheet", "revisions": ["item,amount"]},
    {"name": "Kickoff Deck", "type": "presentation", "revisions": []},
]


def register(client: httpx.Client, user: dict) -> None:
    resp = client.post(f"{BASE_URL}/api/auth/register", json=user)
    if resp.status_code == 201:
        print(f"  Registered {user['email']}")
    elif resp.status_code == 409:
        print(f"  {user['email']} already exists, skipping")
    else:
        resp.raise_for_status()


def login(client: httpx.Client, email: str, password: str) -> dict:
    resp = client.post(
        f"{BASE_URL}/api/auth/login",
        json={"email": email, "password": password},
    )
    resp.raise_for_status()
    return {"Authorization": f"Bearer {resp.json()['access_token']}"}


def create_project(client: httpx.Client, headers: dict) -> str:
    resp = client.post(f"{BASE_URL}/api/projects/", json=PROJECT, headers=headers)
    resp.raise_for_status()
    project_id = resp.json()["id"]
    print(f"  Created project '{PROJECT['name']}' ({project_id})")
    return project_id


def add_member(client: httpx.Client, headers: dict, project_id: str, email: str) -> None:
    resp = client.post(
        f"{BASE_URL}/api/projects/{project_id}/members",
        json={"email": email},
        headers=headers,
    )
    resp.raise_for_status()
    print(f"  Added {email}")


def create_document(client: httpx.Client, headers: dict, project_id: str, doc: dict) -> str:
    resp = client.post(
        f"{BASE_URL}/api/projects/{project_id}/documents",
        json={"name": doc["name"], "type": doc["type"]},
        headers=headers,
    )
    resp.raise_for_status()
    doc_id = resp.json()["id"]
    for content in doc["revisions"]:
        client.post(
            f"{BASE_URL}/api/documents/{doc_id}/versions",
            json={"content": content},
            headers=headers,
        ).raise_for_status()
    print(f"  Created document '{doc['name']}' with {len(doc['revisions'])} version(s)")
    return doc_id


def main() -> None:
    print(f"Seeding against {BASE_URL}\n")

    with httpx.Client(timeout=10) as client:
        # 1. Register users
        print("Users:")
        for user in USERS:
            register(client, user)

        headers = {u["email"]: login(client, u["email"], u["password"]) for u in USERS}
        owner = headers["alice@example.com"]

        # 2. Project and membership
        print("\nProject:")
        project_id = create_project(client, owner)
        add_member(client, owner, project_id, "bob@example.com")

        # 3. Documents with history
        print("\nDocuments:")
        doc_ids = [create_document(client, owner, project_id, doc) for doc in DOCUMENTS]

        client.post(
            f"{BASE_URL}/api/documents/{doc_ids[0]}/comments",
            json={"text": "Can we add a section on code review?"},
            headers=headers["bob@example.com"],
        ).raise_for_status()

    print("\nDone!")


if __name__ == "__main__":
    main()
