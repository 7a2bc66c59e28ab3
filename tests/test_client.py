"""
Tests for the MizbanCloud facade: configuration, shared session, lifecycle.

Run:
    python -m pytest tests/test_client.py -v
"""

import httpx
import pydantic
import pytest

from mizbancloud import MizbanCloud
from mizbancloud.models.common import ClientConfig
from mizbancloud.services import AuthService, CdnService, CloudService, StaticsService
from mizbancloud.utils.validators import ValidationError


class TestConstruction:

    def test_defaults(self):
        client = MizbanCloud()

        assert client.get_language() == "en"
        assert client.get_token() is None
        assert client.is_authenticated() is False
        assert client.http_client.config == ClientConfig()

    def test_modules_are_wired(self):
        client = MizbanCloud()

        assert isinstance(client.auth, AuthService)
        assert isinstance(client.cdn, CdnService)
        assert isinstance(client.cloud, CloudService)
        assert isinstance(client.statics, StaticsService)

    def test_modules_share_one_transport(self):
        client = MizbanCloud()

        transports = {id(m.client) for m in (client.auth, client.cdn, client.cloud, client.statics)}
        assert transports == {id(client.http_client)}

    def test_keyword_options(self):
        client = MizbanCloud(language="fa", timeout=10000, cdn_base_url="https://cdn.example.com")

        assert client.get_language() == "fa"
        assert client.http_client.config.timeout == 10000
        assert client.http_client.config.cdn_base_url == "https://cdn.example.com"

    def test_options_override_config(self):
        config = ClientConfig(language="fa", timeout=1000)
        client = MizbanCloud(config, timeout=2000)

        assert client.get_language() == "fa"
        assert client.http_client.config.timeout == 2000

    def test_unknown_option_is_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            MizbanCloud(base_url="https://example.com")

    def test_invalid_language_option_is_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            MizbanCloud(language="de")


class TestSession:

    def test_token_round_trip(self):
        client = MizbanCloud()

        client.set_token("abc")
        assert client.get_token() == "abc"
        assert client.is_authenticated() is True

        client.set_token(None)
        assert client.get_token() is None
        assert client.is_authenticated() is False

    def test_auth_module_token_is_visible_everywhere(self):
        client = MizbanCloud()

        client.auth.set_api_token("from-auth-module")
        assert client.get_token() == "from-auth-module"
        assert client.auth.get_api_token() == "from-auth-module"

        client.auth.clear_api_token()
        assert client.is_authenticated() is False

    def test_language_round_trip(self):
        client = MizbanCloud()

        client.set_language("fa")
        assert client.get_language() == "fa"
        assert client.http_client.get_language() == "fa"

    def test_invalid_language_keeps_previous(self):
        client = MizbanCloud(language="fa")

        with pytest.raises(ValidationError):
            client.set_language("fr")
        assert client.get_language() == "fa"

    @pytest.mark.asyncio
    async def test_token_set_on_one_module_is_sent_by_another(self, make_client, captured):
        client = make_client()
        client.auth.set_api_token("shared-token")

        await client.cloud.list_servers()
        await client.statics.list_datacenters()

        assert [r.headers["Authorization"] for r in captured] == ["Bearer shared-token"] * 2


class TestLifecycle:

    @pytest.mark.asyncio
    async def test_async_context_manager_closes_clients(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(200, json={"success": True}))

        async with MizbanCloud(transport=transport) as client:
            await client.statics.get_cache_times()

        assert all(http.is_closed for http in client.http_client._clients.values())

    @pytest.mark.asyncio
    async def test_aclose(self):
        client = MizbanCloud()
        await client.aclose()

        assert client.http_client._clients["auth"].is_closed
