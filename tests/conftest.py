"""Test configuration and fixtures for the Users API."""

import os

# Must be set before the application modules read their configuration
os.environ.setdefault("APP_ENVIRONMENT", "test")
os.environ.setdefault("STORAGE_BACKEND", "memory")

from tests.fixtures import *  # noqa: E402,F401,F403
