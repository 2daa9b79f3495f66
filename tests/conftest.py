"""Pytest configuration and fixtures."""

import pytest
from typing import AsyncGenerator, List, Optional

from httpx import AsyncClient, ASGITransport

from config import Config
from shrtn.database.base import MappingStoreBase
from shrtn.database.memory import MappingStoreMemory
from shrtn.database.models import Mapping
from shrtn.errors import StoreError
from shrtn.service import ShortenerService
from shrtn.shortcode import ShortCodeGenerator
from shrtn.common.logging_config import setup_logging
from web_app import create_app


class FailingStore(MappingStoreBase):
    """Store whose every operation fails the way an unreachable backend would."""

    def __init__(self):
        super().__init__("failing://")

    async def put(self, mapping: Mapping) -> str:
        raise StoreError("store unavailable")

    async def query_recent(self, limit: int = 10) -> List[Mapping]:
        raise StoreError("store unavailable")

    async def query_by_code(self, code: str) -> Optional[Mapping]:
        raise StoreError("store unavailable")

    async def health_check(self) -> bool:
        return False

    async def close(self) -> None:
        pass


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
async def test_store(logger) -> AsyncGenerator[MappingStoreMemory, None]:
    """Create in-memory store instance."""
    store = MappingStoreMemory(logger=logger)

    yield store

    await store.close()


@pytest.fixture
def short_code_generator():
    """Create short code generator."""
    return ShortCodeGenerator(default_length=6)


@pytest.fixture
def service(test_store, short_code_generator, logger) -> ShortenerService:
    """Create service instance with the strict policy."""
    return ShortenerService(
        store=test_store,
        short_code_generator=short_code_generator,
        logger=logger,
    )


@pytest.fixture
def config():
    """Configuration pointing at the in-memory store."""
    return Config(store_url="memory://")


def make_client(service: ShortenerService, config: Config) -> AsyncClient:
    """Build an HTTP client bound to an app serving `service`."""
    app = create_app(config=config, service_instance=service)
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver")


@pytest.fixture
async def client(service, config):
    """Create test client."""
    async with make_client(service, config) as ac:
        yield ac


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "https://example.com/test",
        "https://github.com/user/repo",
        "https://stackoverflow.com/questions/123456",
    ]


@pytest.fixture
def lenient_service(test_store, short_code_generator, logger) -> ShortenerService:
    """Create service instance with the lenient policy."""
    return ShortenerService(
        store=test_store,
        short_code_generator=short_code_generator,
        logger=logger,
        url_policy="lenient",
    )


@pytest.fixture
async def lenient_client(lenient_service, config):
    """Test client for the lenient policy."""
    async with make_client(lenient_service, config) as ac:
        yield ac


@pytest.fixture
def failing_service(short_code_generator, logger) -> ShortenerService:
    """Service on top of a store that always fails."""
    return ShortenerService(
        store=FailingStore(),
        short_code_generator=short_code_generator,
        logger=logger,
    )


@pytest.fixture
async def failing_client(failing_service, config):
    """Test client whose store always fails."""
    async with make_client(failing_service, config) as ac:
        yield ac
