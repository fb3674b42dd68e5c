import pytest

from documents.application.services import create_document
from projects.application.services import create_project


@pytest.fixture
async def project(workspace, user):
    return await create_project(
        workspace.projects, workspace.recorder, name="Handbook", owner_id=user.id
    )


@pytest.fixture
async def doc(workspace, user, project):
    return await create_document(
        workspace.documents,
        workspace.registry,
        workspace.recorder,
        project_id=project.id,
        name="Onboarding",
        caller_id=user.id,
    )
