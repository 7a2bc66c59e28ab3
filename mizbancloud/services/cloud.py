"""
Cloud Service
Servers, power, access, rescue, autopilot, monitoring, security groups,
private/public networks, volumes, snapshots and SSH keys
"""

from mizbancloud.services.base import BaseService, Envelope, RequestData


CLOUD = "/api/v1/cloud"
SERVERS = f"{CLOUD}/servers"


class CloudService(BaseService):
    """
    IaaS management.

    Every method returns the decoded response envelope and raises
    MizbanCloudError on failure.
    """

    # ==================== Servers ====================

    async def list_servers(self) -> Envelope:
        return await self.client.auth_request("GET", SERVERS)

    async def get_server(self, server_id: int) -> Envelope:
        return await self.client.auth_request("GET", f"{SERVERS}/{server_id}")

    async def poll_server(self, server_id: int) -> Envelope:
        """Long poll for server status changes"""
        return await self.client.auth_request("GET", f"{SERVERS}/{server_id}/poll")

    async def create_server(self, data: RequestData) -> Envelope:
        """
        Create a new server.

        Args:
            data: CreateServerRequest (name, cpu, ram, storage, storage_type,
                  os_id, datacenter_id, optional is_test / snapshot_id /
                  ssh_key_id / private_network_id)

        Returns:
            Envelope whose data is the created Server
        """
        return await self.client.auth_request("POST", SERVERS, data)

    async def delete_server(self, server_id: int) -> Envelope:
        return await self.client.auth_request("DELETE", f"{SERVERS}/{server_id}")

    async def rename_server(self, server_id: int, name: str) -> Envelope:
        return await self.client.auth_request("POST", f"{SERVERS}/{server_id}/rename", {"name": name})

    async def resize_server(self, server_id: int, data: RequestData) -> Envelope:
        """Change CPU / RAM (ResizeServerRequest)"""
        return await self.client.auth_request("PUT", f"{SERVERS}/{server_id}/rebuild/hardware", data)

    async def reload_os(self, server_id: int, data: RequestData) -> Envelope:
        """Reinstall the operating system (OsReloadRequest)"""
        return await self.client.auth_request("PUT", f"{SERVERS}/{server_id}/rebuild/software", data)

    # ==================== Power Management ====================

    async def power_on(self, server_id: int) -> Envelope:
        return await self.client.auth_request("PUT", f"{SERVERS}/{server_id}/power/on")

    async def power_off(self, server_id: int) -> Envelope:
        """Hard power off"""
        return await self.client.auth_request("PUT", f"{SERVERS}/{server_id}/power/off")

    async def reboot(self, server_id: int) -> Envelope:
        """Hard reboot"""
        return await self.client.auth_request("PUT", f"{SERVERS}/{server_id}/power/reboot")

    async def restart(self, server_id: int) -> Envelope:
        """Graceful restart"""
        return await self.client.auth_request("PUT", f"{SERVERS}/{server_id}/power/restart")

    # ==================== Access ====================

    async def get_vnc(self, server_id: int) -> Envelope:
        return await self.client.auth_request("GET", f"{SERVERS}/{server_id}/access/vnc")

    async def reset_password(self, server_id: int, data: RequestData) -> Envelope:
        return await self.client.auth_request("PUT", f"{SERVERS}/{server_id}/reset-password", data)

    async def get_initial_password(self, server_id: int) -> Envelope:
        """Initial root password of a newly created server"""
        return await self.client.auth_request("POST", f"{SERVERS}/{server_id}/get-password")

    # ==================== Rescue Mode ====================

    async def rescue(self, server_id: int, data: RequestData) -> Envelope:
        """Boot into rescue mode; envelope data carries the rescue password"""
        return await self.client.auth_request("POST", f"{SERVERS}/{server_id}/rescue", data)

    async def unrescue(self, server_id: int) -> Envelope:
        return await self.client.auth_request("POST", f"{SERVERS}/{server_id}/unrescue")

    # ==================== Autopilot (High Availability) ====================

    async def enable_autopilot(self, server_id: int) -> Envelope:
        return await self.client.auth_request("POST", f"{SERVERS}/{server_id}/autopilot/enable")

    async def disable_autopilot(self, server_id: int) -> Envelope:
        return await self.client.auth_request("DELETE", f"{SERVERS}/{server_id}/autopilot/disable")

    # ==================== Monitoring ====================

    async def get_logs(self, server_id: int) -> Envelope:
        """Server action log"""
        return await self.client.auth_request("GET", f"{SERVERS}/{server_id}/logs")

    async def get_charts(self, server_id: int, data: RequestData) -> Envelope:
        """
        Server metrics.

        Args:
            server_id: Server ID
            data: ServerChartsRequest (type, time), sent as query parameters
        """
        return await self.client.auth_request("GET", f"{SERVERS}/{server_id}/reports", data)

    async def get_traffic_usage(self) -> Envelope:
        """Traffic usage for all servers"""
        return await self.client.auth_request("GET", f"{SERVERS}/traffics")

    async def get_traffics(self) -> Envelope:
        return await self.client.auth_request("GET", f"{CLOUD}/traffics")

    # ==================== Test Servers ====================

    async def convert_to_permanent(self, server_id: int) -> Envelope:
        """Convert a test server to a permanent one"""
        # Backend path is spelled "permenant"
        return await self.client.auth_request("POST", f"{SERVERS}/{server_id}/permenant")

    # ==================== Firewall / Security Groups ====================

    async def list_security_groups(self) -> Envelope:
        return await self.client.auth_request("GET", f"{CLOUD}/firewall")

    async def create_security_group(self, data: RequestData) -> Envelope:
        return await self.client.auth_request("POST", f"{CLOUD}/firewall", data)

    async def delete_security_group(self, firewall_id: int) -> Envelope:
        return await self.client.auth_request("DELETE", f"{CLOUD}/firewall/{firewall_id}")

    async def add_security_rule(self, data: RequestData) -> Envelope:
        return await self.client.auth_request("POST", f"{CLOUD}/firewall/rule", data)

    async def remove_security_rule(self, rule_id: int) -> Envelope:
        return await self.client.auth_request("DELETE", f"{CLOUD}/firewall/rule/{rule_id}")

    async def attach_firewall(self, data: RequestData) -> Envelope:
        return await self.client.auth_request("POST", f"{CLOUD}/firewall/attach", data)

    async def detach_firewall(self, data: RequestData) -> Envelope:
        return await self.client.auth_request("POST", f"{CLOUD}/firewall/detach", data)

    # ==================== Private Networks ====================

    async def list_private_networks(self) -> Envelope:
        return await self.client.auth_request("GET", f"{CLOUD}/private-networks")

    async def create_private_network(self, data: RequestData) -> Envelope:
        return await self.client.auth_request("POST", f"{CLOUD}/private-networks", data)

    async def update_private_network(self, network_id: int, data: RequestData) -> Envelope:
        return await self.client.auth_request("PUT", f"{CLOUD}/private-networks/{network_id}", data)

    async def delete_private_network(self, network_id: int) -> Envelope:
        return await self.client.auth_request("DELETE", f"{CLOUD}/private-networks/{network_id}")

    async def attach_to_private_network(self, data: RequestData) -> Envelope:
        return await self.client.auth_request("POST", f"{CLOUD}/private-networks/attach", data)

    async def detach_from_private_network(self, data: RequestData) -> Envelope:
        return await self.client.auth_request("POST", f"{CLOUD}/private-networks/detach", data)

    async def purge_network_attachments(self, network_id: int) -> Envelope:
        """Detach every server from a private network"""
        return await self.client.auth_request(
            "POST", f"{CLOUD}/private-networks/{network_id}/purge-attachments"
        )

    # ==================== Public Networks ====================

    async def attach_public_network(self, server_id: int) -> Envelope:
        return await self.client.auth_request(
            "POST", f"{CLOUD}/public-networks/attach", {"server_id": server_id}
        )

    async def detach_public_network(self, server_id: int) -> Envelope:
        return await self.client.auth_request(
            "POST", f"{CLOUD}/public-networks/detach", {"server_id": server_id}
        )

    # ==================== Volumes ====================

    async def list_volumes(self) -> Envelope:
        return await self.client.auth_request("GET", f"{CLOUD}/volumes")

    async def get_volume(self, volume_id: int) -> Envelope:
        return await self.client.auth_request("GET", f"{CLOUD}/volumes/{volume_id}")

    async def create_volume(self, data: RequestData) -> Envelope:
        return await self.client.auth_request("POST", f"{CLOUD}/volumes", data)

    async def update_volume(self, volume_id: int, data: RequestData) -> Envelope:
        """Rename or resize a volume (UpdateVolumeRequest)"""
        return await self.client.auth_request("PUT", f"{CLOUD}/volumes/{volume_id}", data)

    async def delete_volume(self, volume_id: int) -> Envelope:
        return await self.client.auth_request("DELETE", f"{CLOUD}/volumes/{volume_id}")

    async def attach_volume(self, data: RequestData) -> Envelope:
        return await self.client.auth_request("POST", f"{CLOUD}/volumes/attach", data)

    async def detach_volume(self, volume_id: int) -> Envelope:
        return await self.client.auth_request(
            "POST", f"{CLOUD}/volumes/detach", {"volume_id": volume_id}
        )

    async def sync_volumes(self) -> Envelope:
        """Resync volumes with the OpenStack backend"""
        return await self.client.auth_request("POST", f"{CLOUD}/volumes/sync")

    # ==================== Snapshots ====================

    async def list_snapshots(self) -> Envelope:
        return await self.client.auth_request("GET", f"{CLOUD}/snapshots")

    async def get_snapshot(self, snapshot_id: int) -> Envelope:
        return await self.client.auth_request("GET", f"{CLOUD}/snapshots/{snapshot_id}")

    async def create_snapshot(self, data: RequestData) -> Envelope:
        return await self.client.auth_request("POST", f"{CLOUD}/snapshots", data)

    async def delete_snapshot(self, snapshot_id: int) -> Envelope:
        return await self.client.auth_request("DELETE", f"{CLOUD}/snapshots/{snapshot_id}")

    async def sync_snapshots(self) -> Envelope:
        return await self.client.auth_request("POST", f"{CLOUD}/snapshots/sync")

    # ==================== SSH Keys ====================

    async def list_ssh_keys(self) -> Envelope:
        return await self.client.auth_request("GET", f"{CLOUD}/ssh")

    async def get_ssh_key(self, key_id: int) -> Envelope:
        return await self.client.auth_request("GET", f"{CLOUD}/ssh/{key_id}")

    async def create_ssh_key(self, data: RequestData) -> Envelope:
        return await self.client.auth_request("POST", f"{CLOUD}/ssh", data)

    async def delete_ssh_key(self, key_id: int) -> Envelope:
        return await self.client.auth_request("DELETE", f"{CLOUD}/ssh/{key_id}")

    async def generate_random_ssh_key(self) -> Envelope:
        """Generate a key pair server-side; data holds public_key and private_key"""
        return await self.client.auth_request("GET", f"{CLOUD}/ssh/random")
