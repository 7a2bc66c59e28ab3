"""
Tests for the Cloud module: verbs, paths and payload encoding.

Run:
    python -m pytest tests/test_cloud_service.py -v
"""

import pytest

from mizbancloud.models.cloud import (
    AddSecurityRuleRequest,
    CreateServerRequest,
    ServerChartsRequest,
)

from helpers import form_pairs, query_pairs


C = "/api/v1/cloud"
S = f"{C}/servers"


# (method, args, verb, path, form body pairs)
ENDPOINTS = [
    # Servers
    ("list_servers", (), "GET", S, []),
    ("get_server", (7,), "GET", f"{S}/7", []),
    ("poll_server", (7,), "GET", f"{S}/7/poll", []),
    ("delete_server", (7,), "DELETE", f"{S}/7", []),
    ("rename_server", (7, "web-01"), "POST", f"{S}/7/rename", [("name", "web-01")]),
    ("resize_server", (7, {"cpu": 4, "ram": 8}), "PUT", f"{S}/7/rebuild/hardware", [("cpu", "4"), ("ram", "8")]),
    ("reload_os", (7, {"os_id": 3}), "PUT", f"{S}/7/rebuild/software", [("os_id", "3")]),
    # Power
    ("power_on", (7,), "PUT", f"{S}/7/power/on", []),
    ("power_off", (7,), "PUT", f"{S}/7/power/off", []),
    ("reboot", (7,), "PUT", f"{S}/7/power/reboot", []),
    ("restart", (7,), "PUT", f"{S}/7/power/restart", []),
    # Access
    ("get_vnc", (7,), "GET", f"{S}/7/access/vnc", []),
    ("reset_password", (7, {"password": "S3cret!"}), "PUT", f"{S}/7/reset-password", [("password", "S3cret!")]),
    ("get_initial_password", (7,), "POST", f"{S}/7/get-password", []),
    # Rescue
    ("rescue", (7, {"image_id": 2}), "POST", f"{S}/7/rescue", [("image_id", "2")]),
    ("unrescue", (7,), "POST", f"{S}/7/unrescue", []),
    # Autopilot
    ("enable_autopilot", (7,), "POST", f"{S}/7/autopilot/enable", []),
    ("disable_autopilot", (7,), "DELETE", f"{S}/7/autopilot/disable", []),
    # Monitoring
    ("get_logs", (7,), "GET", f"{S}/7/logs", []),
    ("get_traffic_usage", (), "GET", f"{S}/traffics", []),
    ("get_traffics", (), "GET", f"{C}/traffics", []),
    # Test servers
    ("convert_to_permanent", (7,), "POST", f"{S}/7/permenant", []),
    # Security groups
    ("list_security_groups", (), "GET", f"{C}/firewall", []),
    ("create_security_group", ({"name": "web"},), "POST", f"{C}/firewall", [("name", "web")]),
    ("delete_security_group", (12,), "DELETE", f"{C}/firewall/12", []),
    ("remove_security_rule", (40,), "DELETE", f"{C}/firewall/rule/40", []),
    ("attach_firewall", ({"firewall_id": 12, "server_id": 7},), "POST", f"{C}/firewall/attach",
     [("firewall_id", "12"), ("server_id", "7")]),
    ("detach_firewall", ({"firewall_id": 12, "server_id": 7},), "POST", f"{C}/firewall/detach",
     [("firewall_id", "12"), ("server_id", "7")]),
    # Private networks
    ("list_private_networks", (), "GET", f"{C}/private-networks", []),
    ("create_private_network", ({"name": "lan", "cidr": "10.0.0.0/24"},), "POST", f"{C}/private-networks",
     [("name", "lan"), ("cidr", "10.0.0.0/24")]),
    ("update_private_network", (3, {"name": "lan2"}), "PUT", f"{C}/private-networks/3", [("name", "lan2")]),
    ("delete_private_network", (3,), "DELETE", f"{C}/private-networks/3", []),
    ("attach_to_private_network", ({"network_id": 3, "server_id": 7},), "POST", f"{C}/private-networks/attach",
     [("network_id", "3"), ("server_id", "7")]),
    ("detach_from_private_network", ({"network_id": 3, "server_id": 7},), "POST",
     f"{C}/private-networks/detach", [("network_id", "3"), ("server_id", "7")]),
    ("purge_network_attachments", (3,), "POST", f"{C}/private-networks/3/purge-attachments", []),
    # Public networks
    ("attach_public_network", (7,), "POST", f"{C}/public-networks/attach", [("server_id", "7")]),
    ("detach_public_network", (7,), "POST", f"{C}/public-networks/detach", [("server_id", "7")]),
    # Volumes
    ("list_volumes", (), "GET", f"{C}/volumes", []),
    ("get_volume", (9,), "GET", f"{C}/volumes/9", []),
    ("create_volume", ({"name": "data", "size": 50},), "POST", f"{C}/volumes", [("name", "data"), ("size", "50")]),
    ("update_volume", (9, {"size": 100}), "PUT", f"{C}/volumes/9", [("size", "100")]),
    ("delete_volume", (9,), "DELETE", f"{C}/volumes/9", []),
    ("attach_volume", ({"volume_id": 9, "server_id": 7},), "POST", f"{C}/volumes/attach",
     [("volume_id", "9"), ("server_id", "7")]),
    ("detach_volume", (9,), "POST", f"{C}/volumes/detach", [("volume_id", "9")]),
    ("sync_volumes", (), "POST", f"{C}/volumes/sync", []),
    # Snapshots
    ("list_snapshots", (), "GET", f"{C}/snapshots", []),
    ("get_snapshot", (4,), "GET", f"{C}/snapshots/4", []),
    ("create_snapshot", ({"server_id": 7, "name": "nightly"},), "POST", f"{C}/snapshots",
     [("server_id", "7"), ("name", "nightly")]),
    ("delete_snapshot", (4,), "DELETE", f"{C}/snapshots/4", []),
    ("sync_snapshots", (), "POST", f"{C}/snapshots/sync", []),
    # SSH keys
    ("list_ssh_keys", (), "GET", f"{C}/ssh", []),
    ("get_ssh_key", (2,), "GET", f"{C}/ssh/2", []),
    ("create_ssh_key", ({"name": "laptop", "public_key": "ssh-ed25519 AAAA"},), "POST", f"{C}/ssh",
     [("name", "laptop"), ("public_key", "ssh-ed25519 AAAA")]),
    ("delete_ssh_key", (2,), "DELETE", f"{C}/ssh/2", []),
    ("generate_random_ssh_key", (), "GET", f"{C}/ssh/random", []),
]


class TestEndpoints:

    @pytest.mark.parametrize("method, args, verb, path, body", ENDPOINTS)
    @pytest.mark.asyncio
    async def test_endpoint(self, make_client, captured, method, args, verb, path, body):
        client = make_client()
        client.set_token("cloud-token")

        await getattr(client.cloud, method)(*args)

        assert len(captured) == 1
        request = captured[0]
        assert request.method == verb
        assert request.url.path == path
        assert form_pairs(request) == body
        assert request.headers["Authorization"] == "Bearer cloud-token"


class TestPayloads:

    @pytest.mark.asyncio
    async def test_create_server_from_model(self, make_client, captured):
        envelope = {"success": True, "message": "Server created", "data": {"id": 7, "name": "web-01"}}
        client = make_client(response=envelope)
        request = CreateServerRequest(
            name="web-01", cpu=2, ram=4, storage=50, storage_type="SSD",
            os_id=3, datacenter_id=1, is_test=1,
        )

        result = await client.cloud.create_server(request)

        assert captured[0].method == "POST"
        assert captured[0].url.path == S
        assert form_pairs(captured[0]) == [
            ("name", "web-01"),
            ("cpu", "2"),
            ("ram", "4"),
            ("storage", "50"),
            ("storage_type", "SSD"),
            ("os_id", "3"),
            ("datacenter_id", "1"),
            ("is_test", "1"),
        ]
        assert result["data"]["id"] == 7

    @pytest.mark.asyncio
    async def test_add_security_rule_from_model(self, make_client, captured):
        client = make_client()
        rule = AddSecurityRuleRequest(
            firewall_id=12, direction="ingress", protocol="tcp",
            port_range_min=443, port_range_max=443, remote_ip_prefix="0.0.0.0/0",
        )

        await client.cloud.add_security_rule(rule)

        assert captured[0].url.path == f"{C}/firewall/rule"
        assert dict(form_pairs(captured[0])) == {
            "firewall_id": "12",
            "direction": "ingress",
            "protocol": "tcp",
            "port_range_min": "443",
            "port_range_max": "443",
            "remote_ip_prefix": "0.0.0.0/0",
        }

    @pytest.mark.asyncio
    async def test_get_charts_sends_query(self, make_client, captured):
        client = make_client()

        await client.cloud.get_charts(7, ServerChartsRequest(type="cpu", time="24h"))

        request = captured[0]
        assert request.method == "GET"
        assert request.url.path == f"{S}/7/reports"
        assert query_pairs(request) == [("type", "cpu"), ("time", "24h")]
        assert request.content == b""
