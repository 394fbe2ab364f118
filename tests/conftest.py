"""Shared pytest configuration.

Environment defaults are set before anything under ``src`` is imported, since
the configuration is loaded at import time.
"""

import os

os.environ.setdefault("APP_ENVIRONMENT", "test")
os.environ.setdefault("LOG_FILE", "")

from tests.fixtures import *  # noqa: E402,F401,F403
