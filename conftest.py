"""Root conftest — shared test configuration."""

import os

# Keep tests independent of a developer's .env
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("SWATCH_SIZE", "64")
