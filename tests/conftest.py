import logging

import pytest
import structlog

from qiita_client import QiitaClient, Settings
from tests.doubles import BASE_URL, StubTransport

# Re-export factories for easy access in all tests
from tests.factories import (  # noqa: F401
    CommentPayloadFactory,
    ItemPayloadFactory,
    TagPayloadFactory,
    UserPayloadFactory,
)


@pytest.fixture
def settings() -> Settings:
    """Unauthenticated settings pointing at a fake host."""
    return Settings(base_url=BASE_URL, access_token="", timeout=5.0)


@pytest.fixture
async def make_client(settings):
    """Build clients over a StubTransport; all of them are closed after the test."""
    clients: list[QiitaClient] = []

    def _make(handler, *, settings_override: Settings | None = None, logger=None):
        transport = StubTransport(handler)
        client = QiitaClient(settings_override or settings, transport=transport, logger=logger)
        clients.append(client)
        return client, transport

    yield _make

    for client in clients:
        await client.close()


@pytest.fixture
def restore_logging():
    """Undo the process-wide logging configuration done by setup_logging."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(logging.NOTSET)
    structlog.reset_defaults()
