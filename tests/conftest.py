import itertools

import pytest
from fastapi.testclient import TestClient

from user_crud_api.app.main import create_app
from user_crud_api.app.services.user_store import UserStore


class SequentialIdGenerator:
    """Predictable ids: user-1, user-2, ..."""

    def __init__(self, prefix: str = "user"):
        self.prefix = prefix
        self._counter = itertools.count(1)

    def new_id(self) -> str:
        return f"{self.prefix}-{next(self._counter)}"


@pytest.fixture
def store():
    return UserStore()


@pytest.fixture
def id_generator():
    return SequentialIdGenerator()


@pytest.fixture
def client(store, id_generator):
    """A test client over an app with its own empty store."""
    app = create_app(store=store, id_generator=id_generator)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def uuid_client():
    """A test client using the default random UUID ids."""
    with TestClient(create_app()) as c:
        yield c


@pytest.fixture
def ada():
    return {"name": "Ada", "email": "ada@x.com"}
