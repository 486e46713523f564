"""
Pytest configuration and fixtures for testing.
"""
from datetime import datetime, timezone

import pytest

from crypto_utils.config.app_config import get_app_config
from crypto_utils.config.token_config import get_token_config
from crypto_utils.utils.clock import fixed_clock


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """
    Point configuration at an empty environment for every test.

    Config getters are cached, so the caches are cleared before and after
    each test to keep environment changes from leaking between tests.
    """
    monkeypatch.setenv("CRYPTO_UTILS_CONFIG_PATH", str(tmp_path / "missing-config.yaml"))
    for name in ("JWT_LEEWAY_SECONDS", "JWT_DEFAULT_LIFETIME_HOURS", "CRYPTO_UTILS_SECRET"):
        monkeypatch.delenv(name, raising=False)

    get_app_config.cache_clear()
    get_token_config.cache_clear()
    yield
    get_app_config.cache_clear()
    get_token_config.cache_clear()


@pytest.fixture
def secret():
    """Signing secret shared by token tests."""
    return b"secret"


@pytest.fixture
def issue_time():
    """A fixed issue moment: 2026-01-01T00:00:00Z."""
    return datetime(2026, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def issue_timestamp():
    """``issue_time`` as seconds since the epoch."""
    return 1767225600


@pytest.fixture
def clock(issue_time):
    """A clock frozen at ``issue_time``."""
    return fixed_clock(issue_time)
