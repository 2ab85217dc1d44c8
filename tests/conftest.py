import pytest

from tests.fakes import FakeClient


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def mongo() -> FakeClient:
    return FakeClient()


@pytest.fixture
def core_db(mongo):
    return mongo["core"]
