"""Root conftest: shared test configuration."""

import os

# Tests never pick up a developer's .env overrides for these
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("STRICT_NOT_FOUND", "false")
os.environ.setdefault("ID_START", "0")
