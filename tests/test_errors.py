from fastapi import FastAPI
from fastapi.testclient import TestClient
from starlette.exceptions import HTTPException

from upload_gateway.api.errors import error_status, register_exception_handlers
from upload_gateway.modules.assets import (
    FileTooLargeError,
    InvalidFileTypeError,
    MissingFileError,
    StorageError,
)


def test_error_status_mapping():
    assert error_status(MissingFileError()) == 400
    assert error_status(InvalidFileTypeError()) == 400
    assert error_status(FileTooLargeError()) == 400
    assert error_status(StorageError("disk full")) == 500
    assert error_status(HTTPException(status_code=404)) == 404
    assert error_status(RuntimeError("boom")) == 500


def test_default_messages():
    assert str(MissingFileError()) == "No file provided"
    assert str(FileTooLargeError()) == "File too large"
    assert str(InvalidFileTypeError()).startswith("Invalid file type")


def _app():
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/storage")
    async def storage_failure():
        raise StorageError("disk full at /var/uploads")

    @app.get("/boom")
    async def boom():
        raise RuntimeError("boom")

    return app


def test_storage_error_hides_details():
    client = TestClient(_app())
    resp = client.get("/storage")
    assert resp.status_code == 500
    assert resp.json() == {"error": "Internal server error"}


def test_unexpected_error_is_internal_error():
    client = TestClient(_app(), raise_server_exceptions=False)
    resp = client.get("/boom")
    assert resp.status_code == 500
    assert resp.json() == {"error": "Internal server error"}


def test_unknown_route_uses_error_shape():
    client = TestClient(_app())
    resp = client.get("/nope")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Not Found"}


def test_wrong_method_uses_error_shape():
    client = TestClient(_app())
    resp = client.post("/storage")
    assert resp.status_code == 405
    assert resp.json() == {"error": "Method Not Allowed"}
