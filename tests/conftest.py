import json
import logging

import pytest

from daraza_core import logger as logger_mod

from daraza_core.config import DarazaConfig
from daraza_core.key_manager import APIKeyManager
from daraza_core.storage import InMemoryStore
from daraza_core.transport import BaseTransport, TransportError, TransportResponse

VALID_KEY = "sk_live_" + "A1b2C3d4" * 4


class Clock:
    def __init__(self, t=1_700_000_000):
        self.t = t

    def __call__(self):
        return self.t


class FakeTransport(BaseTransport):
    """Records calls and replays a canned response or error."""
    name = "fake"

    def __init__(self, status_code=200, body=None, error=None):
        self.status_code = status_code
        if body is None:
            body = {"code": "Success"}
        self.body = body if isinstance(body, bytes) else json.dumps(body).encode("utf-8")
        self.error = error
        self.calls = []
        self.closed = False

    def request(self, method, url, headers, json_body=None, timeout=45):
        self.calls.append({
            "method": method,
            "url": url,
            "headers": headers,
            "json": json_body,
            "timeout": timeout,
        })
        if self.error:
            raise TransportError(self.error)
        return TransportResponse(status_code=self.status_code, body=self.body)

    def close(self):
        self.closed = True


@pytest.fixture
def config():
    return DarazaConfig(auth_salt="auth-salt-for-tests", secure_auth_salt="secure-auth-salt-for-tests")


@pytest.fixture
def clock():
    return Clock()


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def manager(store, config, clock):
    return APIKeyManager(store, config, now=clock)


@pytest.fixture
def configured_manager(manager):
    manager.save(VALID_KEY)
    return manager


@pytest.fixture(autouse=True)
def reset_daraza_logging():
    yield
    logger_mod._settings.update(level=None, to_file=None)
    for name, existing in list(logging.root.manager.loggerDict.items()):
        if isinstance(existing, logging.Logger) and name.startswith("daraza"):
            existing.setLevel(logging.INFO)
            for h in list(existing.handlers):
                if isinstance(h, logging.FileHandler):
                    existing.removeHandler(h)
                    h.close()
