"""
Tests for the Auth and Statics modules.

Run:
    python -m pytest tests/test_auth_service.py -v
"""

import pytest


class TestAuthService:

    @pytest.mark.asyncio
    async def test_get_wallet(self, make_client, captured):
        envelope = {"success": True, "message": "", "data": {"balance": 150000, "currency": "IRT"}}
        client = make_client(response=envelope)
        client.auth.set_api_token("t0ken")

        result = await client.auth.get_wallet()

        request = captured[0]
        assert request.method == "GET"
        assert request.url.path == "/api/admin-temp-v1/financial/wallet"
        assert request.headers["Authorization"] == "Bearer t0ken"
        assert result["data"]["balance"] == 150000

    def test_token_helpers_send_no_request(self, make_client, captured):
        client = make_client()

        client.auth.set_api_token("abc")
        assert client.auth.get_api_token() == "abc"
        client.auth.clear_api_token()
        assert client.auth.get_api_token() is None

        assert captured == []

    def test_service_name(self, make_client):
        client = make_client()
        assert client.auth.get_service_name() == "Auth"
        assert client.cdn.get_service_name() == "Cdn"


class TestStaticsService:

    @pytest.mark.parametrize("method, path", [
        ("list_datacenters", "/api/v1/static/datacenters"),
        ("list_operating_systems", "/api/v1/static/os-list"),
        ("get_cache_times", "/api/v1/static/cache-times"),
        ("get_sliders", "/api/v1/static/sliders"),
    ])
    @pytest.mark.asyncio
    async def test_catalog_endpoints(self, make_client, captured, method, path):
        client = make_client()

        await getattr(client.statics, method)()

        assert captured[0].method == "GET"
        assert captured[0].url.path == path
        assert captured[0].content == b""

    @pytest.mark.asyncio
    async def test_catalog_works_without_token(self, make_client, captured):
        client = make_client(response={"success": True, "data": [{"id": 1, "name": "Tehran"}]})

        result = await client.statics.list_datacenters()

        assert "Authorization" not in captured[0].headers
        assert result["data"][0]["name"] == "Tehran"
