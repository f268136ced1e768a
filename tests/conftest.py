"""Root conftest: shared test configuration."""

import os

# Tests never touch a real PostgreSQL or a developer .env administrator
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("REGISTRY_ADMINISTRATOR", "admin")
os.environ.setdefault("LOG_FORMAT", "text")
