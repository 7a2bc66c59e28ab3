"""
Cloud models: servers, security groups, networks, volumes, snapshots, SSH keys
"""

from typing import List, Literal, Optional

from mizbancloud.models.common import MizbanModel
from mizbancloud.models.statics import StorageType


# ==================== Servers ====================

ServerStatus = Literal[
    "ACTIVE",
    "BUILD",
    "REBUILD",
    "SUSPENDED",
    "PAUSED",
    "SHUTOFF",
    "DELETED",
    "ERROR",
    "RESCUE",
    "RESIZE",
    "REBOOT",
    "HARD_REBOOT",
]


class Server(MizbanModel):
    id: int
    user_id: int
    name: str
    status: ServerStatus
    cpu: int
    ram: int
    storage: int
    storage_type: StorageType
    os_id: int
    os_name: Optional[str] = None
    datacenter_id: int
    datacenter_name: Optional[str] = None
    ip_address: Optional[str] = None
    private_ip: Optional[str] = None
    is_test: bool
    autopilot: bool
    created_at: str
    updated_at: str


class CreateServerRequest(MizbanModel):
    name: str
    cpu: int
    ram: int
    storage: int
    storage_type: StorageType
    os_id: int
    datacenter_id: int
    is_test: Optional[Literal[0, 1]] = None
    snapshot_id: Optional[int] = None
    ssh_key_id: Optional[int] = None
    private_network_id: Optional[int] = None


class ResizeServerRequest(MizbanModel):
    cpu: int
    ram: int


class OsReloadRequest(MizbanModel):
    os_id: int


class RescueServerRequest(MizbanModel):
    os_id: int


class ResetPasswordRequest(MizbanModel):
    password: str


class VncAccess(MizbanModel):
    url: str
    token: str
    expires_at: str


class ServerLog(MizbanModel):
    id: int
    action: str
    status: Literal["success", "failed", "pending"]
    message: Optional[str] = None
    created_at: str


class ServerChartsRequest(MizbanModel):
    type: Literal["cpu", "ram", "disk", "network"]
    time: Literal["1h", "6h", "24h", "7d", "30d"]


class MetricDataPoint(MizbanModel):
    timestamp: str
    value: float


class TrafficUsage(MizbanModel):
    server_id: int
    inbound: int
    outbound: int
    total: int
    period: str


# ==================== Security Groups ====================

Direction = Literal["ingress", "egress"]
Protocol = Literal["tcp", "udp", "icmp", "any"]


class SecurityRule(MizbanModel):
    id: int
    direction: Direction
    protocol: Protocol
    port_range_min: Optional[int] = None
    port_range_max: Optional[int] = None
    remote_ip_prefix: str
    description: Optional[str] = None


class SecurityGroup(MizbanModel):
    id: int
    user_id: int
    name: str
    description: Optional[str] = None
    rules: List[SecurityRule] = []
    attached_servers: List[int] = []
    created_at: str


class CreateSecurityGroupRequest(MizbanModel):
    name: str
    description: Optional[str] = None


class AddSecurityRuleRequest(MizbanModel):
    firewall_id: int
    direction: Direction
    protocol: Protocol
    port_range_min: Optional[int] = None
    port_range_max: Optional[int] = None
    remote_ip_prefix: str
    description: Optional[str] = None


class AttachFirewallRequest(MizbanModel):
    firewall_id: int
    server_id: int


# ==================== Networks ====================

class PrivateNetwork(MizbanModel):
    id: int
    user_id: int
    name: str
    cidr: str
    datacenter_id: int
    attached_servers: List[int] = []
    created_at: str


class CreatePrivateNetworkRequest(MizbanModel):
    name: str
    cidr: str
    datacenter_id: int


class UpdatePrivateNetworkRequest(MizbanModel):
    name: Optional[str] = None
    cidr: Optional[str] = None
    datacenter_id: Optional[int] = None


class AttachNetworkRequest(MizbanModel):
    network_id: int
    server_id: int


# ==================== Volumes ====================

class Volume(MizbanModel):
    id: int
    user_id: int
    name: str
    size: int
    type: StorageType
    status: Literal["available", "in-use", "creating", "deleting", "error"]
    attached_to: Optional[int] = None
    datacenter_id: int
    created_at: str


class CreateVolumeRequest(MizbanModel):
    name: str
    size: int
    type: StorageType
    datacenter_id: int


class UpdateVolumeRequest(MizbanModel):
    size: Optional[int] = None
    name: Optional[str] = None


class AttachVolumeRequest(MizbanModel):
    volume_id: int
    server_id: int


# ==================== Snapshots ====================

class Snapshot(MizbanModel):
    id: int
    user_id: int
    server_id: int
    name: str
    size: int
    status: Literal["active", "creating", "deleting", "error"]
    created_at: str


class CreateSnapshotRequest(MizbanModel):
    server_id: int
    name: str


# ==================== SSH Keys ====================

class SshKey(MizbanModel):
    id: int
    user_id: int
    name: str
    public_key: str
    fingerprint: str
    created_at: str


class CreateSshKeyRequest(MizbanModel):
    name: str
    public_key: str


class SshKeyPair(MizbanModel):
    public_key: str
    private_key: str
