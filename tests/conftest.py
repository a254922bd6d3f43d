import pytest

from wcaglab import clear_all_caches
from wcaglab.core.cache import CacheRegistry
from wcaglab.shared import logger


@pytest.fixture
def caches():
    """A private cache registry so tests never see each other's entries."""
    return CacheRegistry()


@pytest.fixture(autouse=True)
def _fresh_shared_caches():
    clear_all_caches()
    yield
    clear_all_caches()


@pytest.fixture
def restore_log_level(monkeypatch):
    monkeypatch.setattr(logger, "_threshold", logger._threshold)
