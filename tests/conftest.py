import logging

import pytest
import structlog
from fastapi.testclient import TestClient

from declension.core.config import Settings
from declension.facade import Declension
from declension.languages.kazakh import KazakhEngine
from declension.languages.registry import build_registry
from declension.languages.russian import RussianEngine
from declension.main import create_app


@pytest.fixture
def ru():
    return RussianEngine()


@pytest.fixture
def kz():
    return KazakhEngine()


@pytest.fixture
def registry():
    return build_registry(Settings())


@pytest.fixture
def facade(registry):
    return Declension(registry)


@pytest.fixture
def restore_logging():
    """Undo the global logging setup that create_app and configure_logging install."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def client(restore_logging):
    app = create_app(Settings(STRICT_CASES=False, DEFAULT_POLICY="auto"))
    with TestClient(app) as c:
        yield c
