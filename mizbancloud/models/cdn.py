"""
CDN models: domains, DNS, SSL, cache, security, page rules, clusters, logging, plans
"""

from typing import Any, Dict, List, Literal, Optional

from pydantic import Field

from mizbancloud.models.common import MizbanModel


# ==================== Domains ====================

class Domain(MizbanModel):
    id: int
    user_id: int
    name: str
    status: Literal["active", "pending", "suspended", "deleted"]
    plan_id: int
    plan_name: Optional[str] = None
    ssl_status: Optional[Literal["active", "pending", "none"]] = None
    ns_status: Optional[Literal["active", "pending"]] = None
    created_at: str
    updated_at: str


class CreateDomainRequest(MizbanModel):
    domain: str
    plan_id: Optional[int] = None


class DomainUsage(MizbanModel):
    requests: int
    bandwidth: int
    cached_requests: int
    cached_bandwidth: int
    threats_blocked: int
    period: str


class WhoisData(MizbanModel):
    domain: str
    registrar: str
    creation_date: str
    expiration_date: str
    name_servers: List[str] = []
    status: List[str] = []


# ==================== DNS ====================

DnsRecordType = Literal["A", "AAAA", "CNAME", "MX", "TXT", "NS", "SRV", "CAA", "PTR", "TLSA", "ALIAS"]


class DnsRecord(MizbanModel):
    id: int
    domain_id: int
    name: str
    type: DnsRecordType
    value: str
    ttl: int
    priority: Optional[int] = None
    proxied: bool
    cloud: Optional[bool] = None
    upstream_https: Optional[str] = None
    weight: Optional[int] = None
    port: Optional[int] = None
    created_at: str
    updated_at: str


class CreateDnsRecordRequest(MizbanModel):
    name: str
    type: DnsRecordType
    value: str
    ttl: Optional[int] = None
    priority: Optional[int] = None
    proxied: Optional[bool] = None
    cloud: Optional[bool] = None
    upstream_https: Optional[str] = None
    weight: Optional[int] = None
    port: Optional[int] = None


class UpdateDnsRecordRequest(MizbanModel):
    """Partial DNS record update; unset fields are not sent"""
    
    name: Optional[str] = None
    type: Optional[DnsRecordType] = None
    value: Optional[str] = None
    ttl: Optional[int] = None
    priority: Optional[int] = None
    proxied: Optional[bool] = None
    cloud: Optional[bool] = None
    upstream_https: Optional[str] = None
    weight: Optional[int] = None
    port: Optional[int] = None


# ==================== SSL / HTTPS ====================

TlsVersion = Literal["1.0", "1.1", "1.2", "1.3"]
BackendProtocol = Literal["http", "https", "auto"]


class SslCertificate(MizbanModel):
    id: int
    domain_id: int
    type: Literal["custom", "free", "default"]
    status: Literal["active", "pending", "expired", "failed"]
    issuer: Optional[str] = None
    expires_at: Optional[str] = None
    created_at: str


class SslInfo(MizbanModel):
    has_ssl: bool
    type: Optional[str] = None
    issuer: Optional[str] = None
    expires_at: Optional[str] = None
    common_name: Optional[str] = None
    san: Optional[List[str]] = None


class SslConfigs(MizbanModel):
    tls_version: TlsVersion
    http2_enabled: bool
    http3_enabled: bool
    https_redirect: bool
    hsts_enabled: bool
    hsts_max_age: Optional[int] = None
    hsts_include_subdomains: Optional[bool] = None
    backend_protocol: BackendProtocol


class AddSslRequest(MizbanModel):
    certificate: str
    private_key: str
    ca_bundle: Optional[str] = None


class HstsRequest(MizbanModel):
    enabled: bool
    max_age: Optional[int] = None
    include_subdomains: Optional[bool] = None
    preload: Optional[bool] = None


# ==================== Cache ====================

CacheMode = Literal["off", "standard", "aggressive", "bypass"]


class MinifySettings(MizbanModel):
    html: bool = False
    css: bool = False
    js: bool = False


class CacheSettings(MizbanModel):
    mode: CacheMode
    ttl: int
    browser_mode: str
    browser_ttl: int
    developer_mode: bool
    always_online: bool
    cache_cookies: bool
    error_cache_ttl: int
    minify: MinifySettings
    image_optimization: bool
    image_resize: bool


class PurgeCacheRequest(MizbanModel):
    purge_all: Optional[bool] = None
    urls: Optional[List[str]] = None
    tags: Optional[List[str]] = None
    prefixes: Optional[List[str]] = None


# ==================== DDoS ====================

CaptchaModule = Literal["recaptcha", "hcaptcha", "turnstile", "arcaptcha"]


class DdosSettings(MizbanModel):
    mode: Optional[Literal["off", "low", "medium", "high", "under_attack"]] = None
    captcha_module: Optional[CaptchaModule] = None
    cookie_challenge_ttl: Optional[int] = None
    js_challenge_ttl: Optional[int] = None
    captcha_challenge_ttl: Optional[int] = None


# ==================== Firewall ====================

FirewallAction = Literal["allow", "block", "challenge"]


class IpRule(MizbanModel):
    ip: str
    action: FirewallAction
    note: Optional[str] = None


class CountryRule(MizbanModel):
    country: str
    action: FirewallAction


class FirewallConfigs(MizbanModel):
    enabled: bool
    default_action: FirewallAction
    ip_rules: List[IpRule] = []
    country_rules: List[CountryRule] = []


class SetFirewallConfigsRequest(MizbanModel):
    enabled: Optional[bool] = None
    default_action: Optional[FirewallAction] = None


class SetIpConfigsRequest(MizbanModel):
    ips: List[IpRule]


class SetCountryConfigsRequest(MizbanModel):
    countries: List[CountryRule]


# ==================== WAF ====================

class WafSettings(MizbanModel):
    enabled: Optional[bool] = None
    mode: Optional[Literal["off", "simulate", "block"]] = None
    sensitivity: Optional[Literal["low", "medium", "high", "paranoid"]] = None


class WafLayer(MizbanModel):
    id: str
    name: str
    enabled: bool
    rules_count: int


class WafRule(MizbanModel):
    id: str
    name: str
    description: Optional[str] = None
    enabled: bool
    layer_id: str


# ==================== Page Rules ====================

class PageRuleSettings(MizbanModel):
    """Per-section rule settings; each section is a free-form mapping"""
    
    cache: Optional[Dict[str, Any]] = None
    ddos: Optional[Dict[str, Any]] = None
    ratelimit: Optional[Dict[str, Any]] = None
    firewall: Optional[Dict[str, Any]] = None
    waf: Optional[Dict[str, Any]] = None
    redirect: Optional[Dict[str, Any]] = None
    headers: Optional[Dict[str, Any]] = None
    cluster: Optional[Dict[str, Any]] = None


class PageRulePath(MizbanModel):
    id: int
    domain_id: int
    path: str
    priority: int
    enabled: bool
    rules: PageRuleSettings
    created_at: str


class CreatePageRulePathRequest(MizbanModel):
    path: str
    priority: Optional[int] = None


class CreateRuleRequest(MizbanModel):
    section: str
    settings: Dict[str, Any]


# ==================== Clusters ====================

ClusterMode = Literal["round_robin", "least_connections", "ip_hash"]


class ClusterServer(MizbanModel):
    id: int
    address: str
    port: int
    weight: int
    enabled: bool
    backup: Optional[bool] = None


class HealthCheckConfig(MizbanModel):
    enabled: Optional[bool] = None
    interval: Optional[int] = None
    timeout: Optional[int] = None
    path: Optional[str] = None
    method: Optional[Literal["GET", "HEAD"]] = None
    expected_codes: Optional[List[int]] = None


class Cluster(MizbanModel):
    id: int
    domain_id: int
    name: str
    mode: ClusterMode
    servers: List[ClusterServer] = []
    health_check: HealthCheckConfig
    enabled: bool


class CreateClusterRequest(MizbanModel):
    name: str
    mode: Optional[ClusterMode] = None


class UpdateClusterRequest(MizbanModel):
    name: Optional[str] = None
    mode: Optional[ClusterMode] = None
    enabled: Optional[bool] = None
    health_check: Optional[HealthCheckConfig] = None


class AddClusterServerRequest(MizbanModel):
    address: str
    port: int
    weight: Optional[int] = None
    backup: Optional[bool] = None


# ==================== Log Forwarders ====================

LogForwarderType = Literal["http", "syslog", "s3", "datadog", "splunk"]


class LogForwarder(MizbanModel):
    id: int
    domain_id: int
    name: str
    type: LogForwarderType
    destination: str
    enabled: bool
    format: Optional[str] = None
    headers: Optional[Dict[str, str]] = None


class CreateLogForwarderRequest(MizbanModel):
    name: str
    type: LogForwarderType
    destination: str
    enabled: Optional[bool] = None
    format: Optional[str] = None
    headers: Optional[Dict[str, str]] = None


class UpdateLogForwarderRequest(MizbanModel):
    name: Optional[str] = None
    type: Optional[LogForwarderType] = None
    destination: Optional[str] = None
    enabled: Optional[bool] = None
    format: Optional[str] = None
    headers: Optional[Dict[str, str]] = None


# ==================== Custom Pages ====================

class CustomPages(MizbanModel):
    e403: Optional[str] = None
    e403waf: Optional[str] = None
    e403iprestrict: Optional[str] = None
    e429: Optional[str] = None
    e502: Optional[str] = None
    e504: Optional[str] = None
    challenge: Optional[str] = None
    captcha_page: Optional[str] = None
    maintenance_mode: Optional[str] = None


# ==================== Plans ====================

class PlanLimits(MizbanModel):
    bandwidth: Optional[int] = None
    requests: Optional[int] = None
    domains: Optional[int] = None
    page_rules: Optional[int] = None
    firewall_rules: Optional[int] = None


class CdnPlan(MizbanModel):
    id: int
    name: str
    price: float
    features: List[str] = []
    limits: PlanLimits = Field(default_factory=PlanLimits)


# ==================== Reports ====================

class ReportsRequest(MizbanModel):
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    granularity: Optional[Literal["minutely", "hourly", "daily", "weekly", "monthly"]] = None
    type: Optional[Literal["traffic", "requests", "threats", "cache", "status_codes"]] = None


class TrafficReport(MizbanModel):
    timestamp: str
    requests: int
    bandwidth: int
    cached_requests: int
    cached_bandwidth: int
    threats: int
