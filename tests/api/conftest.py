"""API test fixtures — FastAPI test client writing into a temporary output dir.

Invariants:
    - get_result_writer overridden: every test writes under its own tmp_path, confined
    - get_settings cache cleared around tests that patch the environment
"""

import pytest
from httpx import ASGITransport, AsyncClient

from srpcalc.api.dependencies import get_result_writer
from srpcalc.config import get_settings
from srpcalc.infrastructure.file_writer import FileResultWriter
from srpcalc.main import app


@pytest.fixture
def output_dir(tmp_path):
    path = tmp_path / "results"
    path.mkdir()
    return path


@pytest.fixture
async def client(output_dir):
    """FastAPI test client with the result writer confined to output_dir."""
    app.dependency_overrides[get_result_writer] = lambda: FileResultWriter(
        base_dir=output_dir, confine=True,
    )
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def settings_env(monkeypatch):
    """Patch environment variables and rebuild cached settings."""
    get_settings.cache_clear()

    def _set(**env):
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        get_settings.cache_clear()
        return get_settings()

    yield _set
    get_settings.cache_clear()
