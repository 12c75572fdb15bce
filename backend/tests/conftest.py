"""Root conftest: shared test configuration."""

import os

# Human-readable logs in test output; never pick up a developer .env port
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("PORT", "3000")
