"""Pytest configuration for service_bootstrap tests"""

import os
import sys
from pathlib import Path

import pytest

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from service_bootstrap.lifecycle import BROKER, CACHE, DATABASE, DEFAULT_ORDER
from tests.fake_resources import EventLog, FakeConfig, FakeConnector


# ============================================================================
# Fake Connector Fixtures
# ============================================================================

@pytest.fixture
def event_log() -> EventLog:
    """Shared event log for all fake connectors of a test."""
    return EventLog()


@pytest.fixture
def make_connectors(event_log):
    """Build fake connectors for the default kinds.

    Keyword arguments map a kind to the failure settings of its connector,
    e.g. ``make_connectors(cache={"connect_error": TimeoutError()})``.
    """
    def _make(**failures):
        return [
            FakeConnector(kind, event_log, **failures.get(kind, {}))
            for kind in DEFAULT_ORDER
        ]
    return _make


@pytest.fixture
def fake_connectors(make_connectors):
    """Fake connectors that always succeed."""
    return make_connectors()


@pytest.fixture
def fake_configs():
    """One fake config per default kind."""
    return {
        DATABASE: FakeConfig("database"),
        CACHE: FakeConfig("cache"),
        BROKER: FakeConfig("broker"),
    }


# ============================================================================
# Environment Setup
# ============================================================================

@pytest.fixture(autouse=True)
def setup_test_env():
    """Set up test environment variables."""
    # Store original values
    original_env = {}
    test_env_vars = {
        'POSTGRES_HOST': 'localhost',
        'POSTGRES_PORT': '5433',
        'POSTGRES_DB': 'test_db',
        'POSTGRES_USER': 'test_user',
        'POSTGRES_PASSWORD': 'test_password',
        'VALKEY_HOST': 'localhost',
        'VALKEY_PORT': '6380',
        'VALKEY_PASSWORD': 'cache_secret',
        'RABBITMQ_ADDR': 'localhost:5673',
        'RABBITMQ_USERNAME': 'test_user',
        'RABBITMQ_PASSWORD': 'test_password',
        'RABBITMQ_VHOST': 'test_vhost',
    }

    for key, value in test_env_vars.items():
        original_env[key] = os.environ.get(key)
        os.environ[key] = value

    yield

    # Restore original values
    for key, value in original_env.items():
        if value is None:
            os.environ.pop(key, None)
        else:
            os.environ[key] = value
