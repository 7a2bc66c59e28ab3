"""
Tests for the command-line interface.

Run:
    python -m pytest tests/test_cli.py -v
"""

from unittest.mock import patch

import httpx
import pytest

from mizbancloud import MizbanCloud
from mizbancloud.cli import build_parser, main, mask_token, render_table


def _client_factory(handler, seen_settings=None):
    """Replacement for create_client that records settings and uses a mock transport"""

    def factory(settings):
        if seen_settings is not None:
            seen_settings.append(settings)
        client = MizbanCloud(settings.client_config(), transport=httpx.MockTransport(handler))
        if settings.has_token():
            client.set_token(settings.api_token)
        return client

    return factory


@pytest.fixture(autouse=True)
def isolated_cwd(monkeypatch, tmp_path):
    """Keep a developer's .env out of the CLI tests"""
    monkeypatch.chdir(tmp_path)


class TestHelpers:

    def test_mask_token(self):
        assert mask_token(None) == "-"
        assert mask_token("") == "-"
        assert mask_token("short") == "*****"
        assert mask_token("abcdefgh12345678wxyz") == "abcdefgh...wxyz"

    def test_render_table(self):
        table = render_table("Servers", [{"id": 1, "name": "web", "ip_address": None}], ["id", "name", "ip_address"])

        assert table.title == "Servers"
        assert [c.header for c in table.columns] == ["id", "name", "ip_address"]
        assert table.row_count == 1

    def test_parser_requires_command(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])


class TestConfigCommand:

    def test_shows_settings_with_masked_token(self, monkeypatch, capsys):
        monkeypatch.setenv("MIZBANCLOUD_API_TOKEN", "abcdefgh12345678wxyz")

        assert main(["config"]) == 0

        out = capsys.readouterr().out
        assert "http://localhost:8003" in out
        assert "abcdefgh...wxyz" in out
        assert "12345678" not in out

    def test_flags_override_environment(self, monkeypatch, capsys):
        monkeypatch.setenv("MIZBANCLOUD_LANGUAGE", "en")

        assert main(["--language", "fa", "config"]) == 0

        out = capsys.readouterr().out
        language_line = next(line for line in out.splitlines() if "Language:" in line)
        assert language_line.split()[-1] == "fa"


class TestListingCommands:

    def test_datacenters(self, capsys):
        def handler(request):
            assert request.url.path == "/api/v1/static/datacenters"
            return httpx.Response(200, json={
                "success": True,
                "message": "",
                "data": [{"id": 1, "name": "Tehran", "location": "Tehran", "country": "IR", "status": "active"}],
                "total": 1,
            })

        with patch("mizbancloud.cli.create_client", _client_factory(handler)):
            assert main(["datacenters"]) == 0

        out = capsys.readouterr().out
        assert "Tehran" in out
        assert "Total: 1" in out

    def test_wallet_renders_single_record(self, capsys):
        def handler(request):
            return httpx.Response(200, json={"success": True, "data": {"balance": 98000, "currency": "IRT"}})

        with patch("mizbancloud.cli.create_client", _client_factory(handler)):
            assert main(["wallet"]) == 0

        assert "98000" in capsys.readouterr().out

    def test_token_flag_reaches_client(self):
        seen_settings = []
        seen_requests = []

        def handler(request):
            seen_requests.append(request)
            return httpx.Response(200, json={"success": True, "data": []})

        with patch("mizbancloud.cli.create_client", _client_factory(handler, seen_settings)):
            assert main(["--token", "cli-token", "servers"]) == 0

        assert seen_settings[0].api_token == "cli-token"
        assert seen_requests[0].headers["Authorization"] == "Bearer cli-token"

    def test_api_error_exits_with_1(self, capsys):
        def handler(request):
            return httpx.Response(401, json={"success": False, "message": "Unauthenticated"})

        with patch("mizbancloud.cli.create_client", _client_factory(handler)):
            assert main(["domains"]) == 1

        out = capsys.readouterr().out
        assert "API Error" in out
        assert "Unauthenticated" in out
