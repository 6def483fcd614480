"""Root conftest — shared test configuration."""

import os

# Tests must not pick up a developer's .env log settings
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("LOG_FORMAT", "text")
