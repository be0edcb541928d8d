"""Test configuration and fixtures for the storefront API."""

import os

# Must be set before the application module loads its configuration
os.environ.setdefault("APP_ENVIRONMENT", "test")
os.environ["LOG_FILE"] = ""

from tests.fixtures import *  # noqa: E402,F401,F403
