import pytest
from fastapi.testclient import TestClient

from app.bootstrap import create_app
from app.repositories.memory_repo import MemoryEmergencyCaseRepository
from app.schemas.emergency_case import EmergencyCaseCreate
from app.tests.payloads import BURNS_PAYLOAD


def _case_input(**overrides) -> EmergencyCaseCreate:
    data = dict(BURNS_PAYLOAD)
    data.update(overrides)
    return EmergencyCaseCreate(**data)


@pytest.fixture
def make_case_input():
    return _case_input


@pytest.fixture
def repo():
    return MemoryEmergencyCaseRepository()


@pytest.fixture
def client(repo):
    with TestClient(create_app(case_repo=repo)) as c:
        yield c
