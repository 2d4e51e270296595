"""
Shared fixtures: fake gateway, in-memory local store and a test client
whose dependencies are overridden with them.

Usage:
    def test_dashboard(client, gateway):
        gateway.seed("workouts", [...])
        response = client.get("/dashboard")
"""

import pytest
from fastapi.testclient import TestClient

from api import deps
from backend.main import create_app
from backend.settings import Settings
from infrastructure.storage import InMemoryKeyValueStore
from tests.fakes import FakeGateway, make_session


@pytest.fixture
def settings():
    return Settings(
        environment="test",
        supabase_url="https://fitness.supabase.co",
        supabase_anon_key="anon-key",
        _env_file=None,
    )


@pytest.fixture
def gateway():
    """Signed-in fake gateway with empty tables."""
    return FakeGateway(session=make_session())


@pytest.fixture
def kv_store():
    return InMemoryKeyValueStore()


@pytest.fixture
def app(settings, gateway, kv_store):
    """Create test app with fake dependencies."""
    test_app = create_app(settings=settings)
    test_app.dependency_overrides[deps.get_settings] = lambda: settings
    test_app.dependency_overrides[deps.get_gateway] = lambda: gateway
    test_app.dependency_overrides[deps.get_key_value_store] = lambda: kv_store
    yield test_app
    test_app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    """Test client that reports redirects instead of following them."""
    return TestClient(app, follow_redirects=False)


@pytest.fixture
def unconfigured_app(kv_store):
    """App whose gateway connection parameters are missing."""
    settings = Settings(environment="test", _env_file=None)
    test_app = create_app(settings=settings)
    test_app.dependency_overrides[deps.get_settings] = lambda: settings
    test_app.dependency_overrides[deps.get_gateway] = lambda: None
    test_app.dependency_overrides[deps.get_key_value_store] = lambda: kv_store
    yield test_app
    test_app.dependency_overrides.clear()


@pytest.fixture
def unconfigured_client(unconfigured_app):
    return TestClient(unconfigured_app, follow_redirects=False)
