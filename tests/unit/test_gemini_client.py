"""
Unit tests for GeminiContentGenerator adapter.

Tests verify the adapter implements ContentGenerator protocol and talks
to upstream correctly, using httpx.MockTransport in place of the network.
"""

import asyncio
import json
import logging

import httpx
import pytest

from src.adapters.gemini import GeminiContentGenerator
from src.domain.exceptions import UpstreamRequestFailed


def run_generate(handler, model: str = "gemini-x", payload: dict | None = None, **kwargs) -> dict:
    """Run generate_content against a mocked upstream."""

    async def go() -> dict:
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            generator = GeminiContentGenerator(client=client, api_key="secret-key", **kwargs)
            return await generator.generate_content(model, payload or {"contents": []})

    return asyncio.run(go())


class TestGeminiContentGeneratorProtocol:
    """Tests for ContentGenerator protocol compliance."""

    def test_no_explicit_inheritance(self) -> None:
        """GeminiContentGenerator uses structural subtyping, not inheritance."""
        assert GeminiContentGenerator.__bases__ == (object,)

    def test_endpoint_for_model(self) -> None:
        """Endpoint embeds the model in the generateContent path."""
        generator = GeminiContentGenerator(client=httpx.AsyncClient(), api_key="k")
        assert generator.endpoint_for("gemini-x") == (
            "https://generativelanguage.googleapis.com/v1beta/models/gemini-x:generateContent"
        )

    def test_endpoint_tolerates_trailing_slash(self) -> None:
        """A trailing slash on base_url does not double up."""
        generator = GeminiContentGenerator(
            client=httpx.AsyncClient(), api_key="k", base_url="http://upstream.test/v1beta/"
        )
        assert generator.endpoint_for("m") == "http://upstream.test/v1beta/models/m:generateContent"


class TestGenerateContent:
    """Tests for generate_content method."""

    def test_posts_payload_with_key_header(self) -> None:
        """Payload is POSTed as JSON with the key in x-goog-api-key."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"candidates": []})

        run_generate(handler, payload={"contents": [{"parts": [{"text": "hi"}]}]})

        request = seen[0]
        assert request.method == "POST"
        assert request.url.path == "/v1beta/models/gemini-x:generateContent"
        assert request.headers["x-goog-api-key"] == "secret-key"
        assert request.headers["content-type"] == "application/json"
        assert json.loads(request.content) == {"contents": [{"parts": [{"text": "hi"}]}]}

    def test_key_not_in_url(self) -> None:
        """The credential never appears in the request URL."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={})

        run_generate(handler)

        assert "secret-key" not in str(seen[0].url)

    def test_returns_decoded_json(self) -> None:
        """Successful response body is returned as a dict."""
        body = {"candidates": [{"content": {"parts": [{"inlineData": {"data": "abc"}}]}}]}

        result = run_generate(lambda request: httpx.Response(200, json=body))

        assert result == body

    def test_non_success_raises_with_upstream_details(self) -> None:
        """Non-2xx raises UpstreamRequestFailed with status, reason and body."""
        error_body = '{"error": {"code": 400, "message": "Image too large"}}'

        with pytest.raises(UpstreamRequestFailed) as exc_info:
            run_generate(lambda request: httpx.Response(400, text=error_body))

        assert exc_info.value.status_code == 400
        assert exc_info.value.reason == "Bad Request"
        assert exc_info.value.details == error_body

    def test_non_success_logs_error(self, caplog: pytest.LogCaptureFixture) -> None:
        """Upstream error body is logged at ERROR level without the key."""
        with caplog.at_level(logging.ERROR, logger="src.adapters.gemini.client"):
            with pytest.raises(UpstreamRequestFailed):
                run_generate(lambda request: httpx.Response(503, text="overloaded"))

        assert any("overloaded" in record.getMessage() for record in caplog.records)
        assert all("secret-key" not in record.getMessage() for record in caplog.records)

    def test_transport_error_propagates(self) -> None:
        """Network failures are not converted into upstream status errors."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(httpx.ConnectError):
            run_generate(handler)
