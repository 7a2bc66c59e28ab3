"""
Typed data models for MizbanCloud API payloads and responses
"""

from mizbancloud.models.common import (
    ApiError,
    ApiResponse,
    ClientConfig,
    Language,
    MizbanModel,
    PaginatedResponse,
    RequestOptions,
    TokenInfo,
)
from mizbancloud.models.auth import (
    Wallet,
)
from mizbancloud.models.statics import (
    CacheTime,
    Datacenter,
    OperatingSystem,
    Slider,
    StorageType,
)
from mizbancloud.models.cdn import (
    AddClusterServerRequest,
    AddSslRequest,
    BackendProtocol,
    CacheMode,
    CacheSettings,
    CaptchaModule,
    CdnPlan,
    Cluster,
    ClusterMode,
    ClusterServer,
    CountryRule,
    CreateClusterRequest,
    CreateDnsRecordRequest,
    CreateDomainRequest,
    CreateLogForwarderRequest,
    CreatePageRulePathRequest,
    CreateRuleRequest,
    CustomPages,
    DdosSettings,
    DnsRecord,
    DnsRecordType,
    Domain,
    DomainUsage,
    FirewallAction,
    FirewallConfigs,
    HealthCheckConfig,
    HstsRequest,
    IpRule,
    LogForwarder,
    LogForwarderType,
    MinifySettings,
    PageRulePath,
    PageRuleSettings,
    PlanLimits,
    PurgeCacheRequest,
    ReportsRequest,
    SetCountryConfigsRequest,
    SetFirewallConfigsRequest,
    SetIpConfigsRequest,
    SslCertificate,
    SslConfigs,
    SslInfo,
    TlsVersion,
    TrafficReport,
    UpdateClusterRequest,
    UpdateDnsRecordRequest,
    UpdateLogForwarderRequest,
    WafLayer,
    WafRule,
    WafSettings,
    WhoisData,
)
from mizbancloud.models.cloud import (
    AddSecurityRuleRequest,
    AttachFirewallRequest,
    AttachNetworkRequest,
    AttachVolumeRequest,
    CreatePrivateNetworkRequest,
    CreateSecurityGroupRequest,
    CreateServerRequest,
    CreateSnapshotRequest,
    CreateSshKeyRequest,
    CreateVolumeRequest,
    Direction,
    MetricDataPoint,
    OsReloadRequest,
    PrivateNetwork,
    Protocol,
    RescueServerRequest,
    ResetPasswordRequest,
    ResizeServerRequest,
    SecurityGroup,
    SecurityRule,
    Server,
    ServerChartsRequest,
    ServerLog,
    ServerStatus,
    Snapshot,
    SshKey,
    SshKeyPair,
    TrafficUsage,
    UpdatePrivateNetworkRequest,
    UpdateVolumeRequest,
    VncAccess,
    Volume,
)

__all__ = [
    # common
    "ApiError",
    "ApiResponse",
    "ClientConfig",
    "Language",
    "MizbanModel",
    "PaginatedResponse",
    "RequestOptions",
    "TokenInfo",
    # auth
    "Wallet",
    # statics
    "CacheTime",
    "Datacenter",
    "OperatingSystem",
    "Slider",
    "StorageType",
    # cdn
    "AddClusterServerRequest",
    "AddSslRequest",
    "BackendProtocol",
    "CacheMode",
    "CacheSettings",
    "CaptchaModule",
    "CdnPlan",
    "Cluster",
    "ClusterMode",
    "ClusterServer",
    "CountryRule",
    "CreateClusterRequest",
    "CreateDnsRecordRequest",
    "CreateDomainRequest",
    "CreateLogForwarderRequest",
    "CreatePageRulePathRequest",
    "CreateRuleRequest",
    "CustomPages",
    "DdosSettings",
    "DnsRecord",
    "DnsRecordType",
    "Domain",
    "DomainUsage",
    "FirewallAction",
    "FirewallConfigs",
    "HealthCheckConfig",
    "HstsRequest",
    "IpRule",
    "LogForwarder",
    "LogForwarderType",
    "MinifySettings",
    "PageRulePath",
    "PageRuleSettings",
    "PlanLimits",
    "PurgeCacheRequest",
    "ReportsRequest",
    "SetCountryConfigsRequest",
    "SetFirewallConfigsRequest",
    "SetIpConfigsRequest",
    "SslCertificate",
    "SslConfigs",
    "SslInfo",
    "TlsVersion",
    "TrafficReport",
    "UpdateClusterRequest",
    "UpdateDnsRecordRequest",
    "UpdateLogForwarderRequest",
    "WafLayer",
    "WafRule",
    "WafSettings",
    "WhoisData",
    # cloud
    "AddSecurityRuleRequest",
    "AttachFirewallRequest",
    "AttachNetworkRequest",
    "AttachVolumeRequest",
    "CreatePrivateNetworkRequest",
    "CreateSecurityGroupRequest",
    "CreateServerRequest",
    "CreateSnapshotRequest",
    "CreateSshKeyRequest",
    "CreateVolumeRequest",
    "Direction",
    "MetricDataPoint",
    "OsReloadRequest",
    "PrivateNetwork",
    "Protocol",
    "RescueServerRequest",
    "ResetPasswordRequest",
    "ResizeServerRequest",
    "SecurityGroup",
    "SecurityRule",
    "Server",
    "ServerChartsRequest",
    "ServerLog",
    "ServerStatus",
    "Snapshot",
    "SshKey",
    "SshKeyPair",
    "TrafficUsage",
    "UpdatePrivateNetworkRequest",
    "UpdateVolumeRequest",
    "VncAccess",
    "Volume",
]
