"""Tests for POST /parse endpoint."""

import base64
from unittest.mock import patch

from fastapi import FastAPI
from fastapi.testclient import TestClient

from watch_quotes.api.config import Settings, get_settings
from watch_quotes.api.routes.parse import router

CHAT = (
    "01/12/2023, 10:30 - Seller A: I have Rolex 116500LN, price $150000, 保卡 2022-06-15\n"
    "01/12/2023, 10:35 - Buyer: Interested\n"
)


def _make_app(**settings) -> FastAPI:
    """Build a test app with settings that never read the environment."""
    app = FastAPI()
    app.include_router(router)
    app.dependency_overrides[get_settings] = lambda: Settings(**settings)
    return app


class TestParseRoute:
    def test_text_payload(self):
        client = TestClient(_make_app())
        response = client.post("/parse", json={"text": CHAT})

        assert response.status_code == 200
        body = response.json()
        assert body["total_messages"] == 2
        assert body["total_quotations"] == 1
        quote = body["quotations"][0]
        assert quote["watch_model"] == "116500LN"
        assert quote["price_minor_units"] == 15000000
        assert quote["currency_code"] == "HKD"
        assert quote["warranty_date"] == "2022-06-15"
        assert "messages" not in body

    def test_base64_upload(self):
        client = TestClient(_make_app())
        content = base64.b64encode(CHAT.encode("utf-8")).decode("ascii")
        response = client.post(
            "/parse",
            json={"filename": "dealers.txt", "content": content, "include_messages": True},
            headers={"X-Trace-Id": "trace-1"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["source_name"] == "dealers.txt"
        assert [m["author"] for m in body["messages"]] == ["Seller A", "Buyer"]

    def test_missing_payload_returns_422(self):
        client = TestClient(_make_app())
        response = client.post("/parse", json={"filename": "x.txt"})
        assert response.status_code == 422

    def test_bad_base64_returns_422(self):
        client = TestClient(_make_app())
        response = client.post("/parse", json={"filename": "x.txt", "content": "%%%"})
        assert response.status_code == 422
        assert "base64" in response.json()["detail"]

    def test_oversized_text_returns_413(self):
        client = TestClient(_make_app(MAX_UPLOAD_BYTES=10))
        response = client.post("/parse", json={"text": CHAT})
        assert response.status_code == 413

    def test_oversized_upload_returns_413(self):
        client = TestClient(_make_app(MAX_UPLOAD_BYTES=10))
        content = base64.b64encode(CHAT.encode("utf-8")).decode("ascii")
        response = client.post("/parse", json={"content": content})
        assert response.status_code == 413

    def test_country_code_setting_applied(self):
        client = TestClient(_make_app(DEFAULT_COUNTRY_CODE="+65"))
        text = "01/12/2023, 10:30 - Ken: 126710BLRO HKD 120k, call 91234567"
        response = client.post("/parse", json={"text": text})
        assert response.json()["quotations"][0]["seller_phone"] == "+6591234567"

    @patch("watch_quotes.api.routes.parse.TranscriptPipeline")
    def test_pipeline_failure_returns_500(self, mock_pipeline_cls):
        mock_pipeline_cls.return_value.parse.side_effect = RuntimeError("boom")

        client = TestClient(_make_app())
        response = client.post("/parse", json={"text": CHAT})

        assert response.status_code == 500
        assert response.json()["success"] is False
