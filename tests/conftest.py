"""Root conftest — shared test configuration."""

import os

# Keep tests from writing into the working directory's default output dir
os.environ.setdefault("OUTPUT_DIR", "test-results")
os.environ.setdefault("LOG_FORMAT", "text")
