import pytest
from fastapi.testclient import TestClient

from upload_gateway.core.config import Settings
from upload_gateway.main import create_app

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00\x00\x00\rIHDR" + bytes(range(256)) * 4


@pytest.fixture
def png_bytes():
    return PNG_BYTES


@pytest.fixture
def make_settings(tmp_path):
    def _make(**overrides):
        overrides.setdefault("uploads_dir", tmp_path / "uploads")
        return Settings(_env_file=None, **overrides)

    return _make


@pytest.fixture
def settings(make_settings):
    return make_settings()


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
