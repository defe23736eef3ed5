import pytest
from fastapi.testclient import TestClient

from library_catalogue.app.core.store import init_store
from library_catalogue.app.main import app


@pytest.fixture(autouse=True)
def store():
    # Each test starts from an empty catalogue with the id counter at 1
    return init_store(load_sample_data=False)


@pytest.fixture
def sample_store():
    return init_store(load_sample_data=True)


@pytest.fixture
def client():
    # Not used as a context manager, so the startup hook does not reseed
    # the store prepared by the fixtures above.
    return TestClient(app)


@pytest.fixture
def dune_payload():
    return {"title": "Dune", "author": "Frank Herbert", "publicationYear": 1965}
