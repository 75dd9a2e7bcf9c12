"""Root conftest — shared test configuration."""

import os

# Ensure tests never reach a real archive service
os.environ["ARCHIVE_BASE_URL"] = ""
os.environ.setdefault("LOG_FORMAT", "text")
