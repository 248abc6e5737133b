import pytest
from fastapi.testclient import TestClient

from researchsurvey.api.deps import get_answer_repository, get_clock, get_research_repository
from researchsurvey.app import create_app


@pytest.fixture()
def client(research_repo, answer_repo, clock):
    app = create_app(init_database=False)
    app.dependency_overrides[get_research_repository] = lambda: research_repo
    app.dependency_overrides[get_answer_repository] = lambda: answer_repo
    app.dependency_overrides[get_clock] = lambda: clock
    return TestClient(app)
