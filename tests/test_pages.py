"""Tests for static pages, public assets and fallback errors."""

from unittest.mock import patch

import pytest
from httpx import AsyncClient

from gateway.config import settings


class TestStaticPages:
    """Tests for /, /about and /docs."""

    @pytest.mark.parametrize("path", ["/", "/about", "/docs"])
    async def test_page_served_as_html(self, client: AsyncClient, path: str):
        response = await client.get(path)

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "<html" in response.text

    async def test_missing_page_returns_404_envelope(self, client: AsyncClient, tmp_path):
        with patch.object(settings, "views_dir", tmp_path):
            response = await client.get("/about")

        assert response.status_code == 404
        assert response.json()["status"] is False
        assert response.json()["code"] == 404


class TestPublicAssets:
    """Tests for the /public static mount."""

    async def test_asset_served(self, client: AsyncClient):
        response = await client.get("/public/style.css")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/css")

    async def test_missing_asset_returns_404_envelope(self, client: AsyncClient):
        response = await client.get("/public/missing.js")

        assert response.status_code == 404
        assert response.json()["code"] == 404


class TestFallbacks:
    """Tests for health and unknown routes."""

    async def test_health_returns_ok(self, client: AsyncClient):
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    async def test_unknown_route_returns_404_envelope(self, client: AsyncClient):
        response = await client.get("/nope")

        assert response.status_code == 404
        assert response.json()["message"] == "Not Found"

    async def test_wrong_method_keeps_allow_header(self, client: AsyncClient):
        response = await client.put("/apikey", params={"key": "APIKEY"})

        assert response.status_code == 405
        assert response.json()["code"] == 405
        assert "GET" in response.headers["allow"]

    async def test_cors_allows_any_origin(self, client: AsyncClient):
        response = await client.get("/health", headers={"Origin": "https://example.com"})

        assert response.headers["access-control-allow-origin"] == "*"
