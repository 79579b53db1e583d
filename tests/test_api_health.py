"""Tests for the /health endpoint."""

from fastapi import FastAPI
from fastapi.testclient import TestClient

from watch_quotes import __version__
from watch_quotes.api.config import Settings, get_settings
from watch_quotes.api.routes.health import router


def _make_app() -> FastAPI:
    app = FastAPI()
    app.include_router(router)
    app.dependency_overrides[get_settings] = lambda: Settings(SERVICE_NAME="quotes-test")
    return app


class TestHealthRoute:
    def test_health_ok(self):
        client = TestClient(_make_app())
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "service": "quotes-test", "version": __version__}
