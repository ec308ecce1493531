"""Root pytest configuration.

Test Structure:
    tests/
    ├── capstone/              # Application tests
    │   ├── unit/              # Fast, isolated tests (mocks, no I/O)
    │   └── integration/       # SQLite-backed repositories and API
    ├── capstone_auth/         # Token verification tests
    └── shared/                # Shared fixtures and utilities

Markers:
    integration    Tests that hit a (temporary SQLite) database
    slow           Tests that take more than 1 second

Pytest Options:
    --skip-integration   Run unit tests only
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Load .env.dev for tests (same as local development)
CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.dev").exists():
    load_dotenv(CONFIG_DIR / ".env.dev")
elif (CONFIG_DIR / ".env").exists():
    load_dotenv(CONFIG_DIR / ".env")

# The app module builds an app at import time; it needs a secret to do so
os.environ.setdefault("JWT_SECRET_KEY", "test-jwt-secret-for-testing-only")

from capstone_config import clear_settings_cache  # noqa: E402


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--skip-integration",
        action="store_true",
        default=False,
        help="Skip tests marked with @pytest.mark.integration",
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: Tests that verify database/persistence behavior",
    )
    config.addinivalue_line(
        "markers",
        "slow: Tests that take more than 1 second",
    )


def pytest_collection_modifyitems(config, items):
    """Skip integration tests when asked to."""
    skip_integration = config.getoption("--skip-integration") or os.environ.get(
        "SKIP_INTEGRATION",
        "",
    ).lower() in ("1", "true", "yes")
    if not skip_integration:
        return

    marker = pytest.mark.skip(reason="Integration test - --skip-integration set")
    for item in items:
        if "integration" in {mark.name for mark in item.iter_markers()}:
            item.add_marker(marker)


@pytest.fixture(scope="session", autouse=True)
def configure_app_settings():
    """Ensure settings are loaded fresh for the test session."""
    clear_settings_cache()
    yield
    clear_settings_cache()
