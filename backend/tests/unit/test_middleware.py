from fastapi import FastAPI, HTTPException
from fastapi.testclient import TestClient

from reviewledger.core.middleware import ExceptionHandlerMiddleware


def _app():
    app = FastAPI()
    app.add_middleware(ExceptionHandlerMiddleware)

    @app.get("/boom")
    async def boom():
        raise RuntimeError("kaboom")

    @app.get("/teapot")
    async def teapot():
        raise HTTPException(status_code=418, detail="short and stout")

    return app


def test_unhandled_exception_becomes_500():
    client = TestClient(_app(), raise_server_exceptions=False)
    response = client.get("/boom")
    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error", "type": "server_error"}


def test_http_exception_passes_through():
    client = TestClient(_app())
    response = client.get("/teapot")
    assert response.status_code == 418
    assert response.json() == {"detail": "short and stout"}
