"""Functional test bootstrap.

Each test gets a freshly built application, and therefore an empty
participant store and a cleared visibility flag, behind an in-process
TestClient.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from survey_app.config import Settings
from survey_app.main import create_app

QUESTIONNAIRE_TEST = "# Test Questions\n\n## Q1\nQuestion\n=1\n- choice1\n- choice2\n## End"
ADMIN_SECRET = "1234"


@pytest.fixture
def settings() -> Settings:
    return Settings(questionnaire=QUESTIONNAIRE_TEST, admin_secret=ADMIN_SECRET, max_question_index=63)


@pytest.fixture
def client(settings: Settings):
    with TestClient(create_app(settings)) as c:
        yield c
