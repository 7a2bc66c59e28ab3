"""
CDN Service
Domains, DNS, SSL/HTTPS, cache, acceleration, DDoS, firewall, WAF,
page rules, clusters, log forwarders, custom pages and plans
"""

from typing import Any, Dict, List, Literal, Mapping, Optional

from mizbancloud.api.form_encoding import to_plain_data
from mizbancloud.services.base import BaseService, Envelope, RequestData


DOMAINS = "/api/v1/cdn/ng/domains"
PLANS = "/api/v1/cdn/ng/plans"


class CdnService(BaseService):
    """
    CDN management for domains registered on MizbanCloud.

    Every method returns the decoded response envelope
    ({"success", "message", "data", ...}) and raises MizbanCloudError on failure.
    """

    # ==================== Domains ====================

    async def list_domains(self) -> Envelope:
        return await self.client.auth_request("GET", DOMAINS)

    async def get_domain(self, domain_id: int) -> Envelope:
        return await self.client.auth_request("GET", f"{DOMAINS}/{domain_id}")

    async def add_domain(self, data: RequestData) -> Envelope:
        """
        Add a new domain.

        Args:
            data: CreateDomainRequest (domain, optional plan_id)

        Returns:
            Envelope whose data is the created Domain
        """
        return await self.client.auth_request("POST", DOMAINS, data)

    async def delete_domain(self, domain_id: int, confirm_code: str) -> Envelope:
        """
        Delete a domain.

        Args:
            domain_id: Domain ID
            confirm_code: Code sent by send_delete_confirm_code()
        """
        return await self.client.auth_request(
            "DELETE", f"{DOMAINS}/{domain_id}", {"confirm_code": confirm_code}
        )

    async def send_delete_confirm_code(self, domain_id: int) -> Envelope:
        """Send the delete confirmation code via SMS"""
        return await self.client.auth_request("GET", f"{DOMAINS}/{domain_id}/send-confirm-code")

    async def get_usage(self, domain_id: int) -> Envelope:
        return await self.client.auth_request("GET", f"{DOMAINS}/{domain_id}/usage")

    async def get_whois(self, domain_id: int) -> Envelope:
        return await self.client.auth_request("GET", f"{DOMAINS}/{domain_id}/whois")

    async def get_reports(self, domain_id: int, data: Optional[RequestData] = None) -> Envelope:
        """Domain analytics; data is a ReportsRequest (date range, granularity, type)"""
        return await self.client.auth_request("POST", f"{DOMAINS}/{domain_id}/reports", data)

    async def set_redirect_mode(self, domain_id: int, mode: Literal["www", "non-www", "none"]) -> Envelope:
        """Redirect www to non-www (or the reverse)"""
        return await self.client.auth_request(
            "POST", f"{DOMAINS}/{domain_id}/redirect-mode", {"mode": mode}
        )

    # ==================== DNS ====================

    async def list_dns_records(self, domain_id: int) -> Envelope:
        return await self.client.auth_request("GET", f"{DOMAINS}/{domain_id}/dns")

    async def get_dns_record(self, domain_id: int, record_id: int) -> Envelope:
        return await self.client.auth_request("GET", f"{DOMAINS}/{domain_id}/dns/{record_id}")

    async def add_dns_record(self, domain_id: int, data: RequestData) -> Envelope:
        return await self.client.auth_request("POST", f"{DOMAINS}/{domain_id}/dns", data)

    async def update_dns_record(self, domain_id: int, record_id: int, data: RequestData) -> Envelope:
        return await self.client.auth_request("PUT", f"{DOMAINS}/{domain_id}/dns/{record_id}", data)

    async def delete_dns_record(self, domain_id: int, record_id: int) -> Envelope:
        return await self.client.auth_request("DELETE", f"{DOMAINS}/{domain_id}/dns/{record_id}")

    async def fetch_records(self, domain_id: int) -> Envelope:
        """Auto-import DNS records from the current registrar"""
        return await self.client.auth_request("POST", f"{DOMAINS}/{domain_id}/dns/fetch-records")

    async def export_dns_records(self, domain_id: int) -> Envelope:
        """Export DNS records as a BIND zone (envelope data is a string)"""
        return await self.client.auth_request("GET", f"{DOMAINS}/{domain_id}/dns/export")

    async def import_dns_records(self, domain_id: int, records: str) -> Envelope:
        """
        Import DNS records from a BIND zone.

        Args:
            domain_id: Domain ID
            records: Zone file contents
        """
        return await self.client.auth_request(
            "POST", f"{DOMAINS}/{domain_id}/dns/import", {"file": records}
        )

    async def get_proxiable_records(self, domain_id: int) -> Envelope:
        """Proxiable records, including trashed ones"""
        return await self.client.auth_request("GET", f"{DOMAINS}/{domain_id}/dns/proxiable")

    async def set_custom_nameservers(self, domain_id: int, nameservers: List[str]) -> Envelope:
        return await self.client.auth_request(
            "POST", f"{DOMAINS}/{domain_id}/dns/custom-ns", {"nameservers": nameservers}
        )

    async def set_dnssec(self, domain_id: int, enabled: bool) -> Envelope:
        return await self.client.auth_request(
            "POST", f"{DOMAINS}/{domain_id}/dns/dnssec", {"enabled": self._flag(enabled)}
        )

    # ==================== SSL / HTTPS ====================

    async def list_ssl(self, domain_id: int) -> Envelope:
        return await self.client.auth_request("GET", f"{DOMAINS}/{domain_id}/https/ssl")

    async def get_ssl_info(self, domain_id: int) -> Envelope:
        """Currently active certificate"""
        return await self.client.auth_request("GET", f"{DOMAINS}/{domain_id}/https/ssl/get-info")

    async def get_ssl_configs(self, domain_id: int) -> Envelope:
        return await self.client.auth_request("GET", f"{DOMAINS}/{domain_id}/https/ssl/get-configs")

    async def add_custom_ssl(self, domain_id: int, data: RequestData) -> Envelope:
        """Upload a custom certificate (AddSslRequest: certificate, private_key, ca_bundle)"""
        return await self.client.auth_request("POST", f"{DOMAINS}/{domain_id}/https/ssl/add", data)

    async def request_free_ssl(self, domain_id: int) -> Envelope:
        """Request a free (Let's Encrypt) certificate"""
        return await self.client.auth_request("POST", f"{DOMAINS}/{domain_id}/https/ssl/free")

    async def remove_ssl(self, domain_id: int, ssl_id: int) -> Envelope:
        return await self.client.auth_request("DELETE", f"{DOMAINS}/{domain_id}/https/ssl/{ssl_id}")

    async def attach_ssl(self, domain_id: int, ssl_id: int) -> Envelope:
        return await self.client.auth_request(
            "POST", f"{DOMAINS}/{domain_id}/https/attach", {"ssl_id": ssl_id}
        )

    async def detach_ssl(self, domain_id: int) -> Envelope:
        return await self.client.auth_request("POST", f"{DOMAINS}/{domain_id}/https/detach")

    async def attach_default_ssl(self, domain_id: int) -> Envelope:
        """Attach the shared default certificate"""
        return await self.client.auth_request("POST", f"{DOMAINS}/{domain_id}/https/attach-default")

    async def detach_default_ssl(self, domain_id: int) -> Envelope:
        return await self.client.auth_request("POST", f"{DOMAINS}/{domain_id}/https/detach-default")

    async def set_tls_version(self, domain_id: int, version: Literal["1.0", "1.1", "1.2", "1.3"]) -> Envelope:
        """Set the minimum TLS version"""
        return await self.client.auth_request(
            "POST", f"{DOMAINS}/{domain_id}/https/ssl/tls-version", {"version": version}
        )

    async def set_hsts(self, domain_id: int, data: RequestData) -> Envelope:
        return await self.client.auth_request("POST", f"{DOMAINS}/{domain_id}/https/hsts", data)

    async def set_https_redirect(self, domain_id: int, enabled: bool) -> Envelope:
        return await self.client.auth_request(
            "POST", f"{DOMAINS}/{domain_id}/https/redirect", {"enabled": self._flag(enabled)}
        )

    async def set_csp_override(self, domain_id: int, csp: str) -> Envelope:
        """Override the Content-Security-Policy header"""
        return await self.client.auth_request(
            "POST", f"{DOMAINS}/{domain_id}/https/csp-override", {"csp": csp}
        )

    async def set_backend_protocol(self, domain_id: int, protocol: Literal["http", "https", "auto"]) -> Envelope:
        """Protocol used towards the origin"""
        return await self.client.auth_request(
            "POST", f"{DOMAINS}/{domain_id}/https/backend-protocol", {"protocol": protocol}
        )

    async def set_http3(self, domain_id: int, enabled: bool) -> Envelope:
        return await self.client.auth_request(
            "POST", f"{DOMAINS}/{domain_id}/https/h3", {"enabled": self._flag(enabled)}
        )

    # ==================== Cache ====================

    async def get_cache_settings(self, domain_id: int) -> Envelope:
        return await self.client.auth_request("GET", f"{DOMAINS}/{domain_id}/cache")

    async def set_cache_mode(
        self,
        domain_id: int,
        mode: Literal["off", "standard", "aggressive", "bypass"]
    ) -> Envelope:
        return await self.client.auth_request(
            "POST", f"{DOMAINS}/{domain_id}/cache/edge/change-mode", {"mode": mode}
        )

    async def set_cache_ttl(self, domain_id: int, ttl: int) -> Envelope:
        return await self.client.auth_request(
            "POST", f"{DOMAINS}/{domain_id}/cache/edge/change-ttl", {"ttl": ttl}
        )

    async def set_developer_mode(self, domain_id: int, enabled: bool) -> Envelope:
        """Developer mode bypasses the edge cache"""
        return await self.client.auth_request(
            "POST", f"{DOMAINS}/{domain_id}/cache/edge/developer-mode", {"enabled": self._flag(enabled)}
        )

    async def set_always_online(self, domain_id: int, enabled: bool) -> Envelope:
        return await self.client.auth_request(
            "POST", f"{DOMAINS}/{domain_id}/cache/edge/always-online", {"enabled": self._flag(enabled)}
        )

    async def set_cache_cookies(self, domain_id: int, enabled: bool) -> Envelope:
        return await self.client.auth_request(
            "POST", f"{DOMAINS}/{domain_id}/cache/edge/cache-cookies", {"enabled": self._flag(enabled)}
        )

    async def set_browser_cache_mode(self, domain_id: int, mode: str) -> Envelope:
        return await self.client.auth_request(
            "POST", f"{DOMAINS}/{domain_id}/cache/browser/change-mode", {"mode": mode}
        )

    async def set_browser_cache_ttl(self, domain_id: int, ttl: int) -> Envelope:
        return await self.client.auth_request(
            "POST", f"{DOMAINS}/{domain_id}/cache/browser/change-ttl", {"ttl": ttl}
        )

    async def set_error_cache_ttl(self, domain_id: int, ttl: int) -> Envelope:
        """TTL for cached error responses"""
        return await self.client.auth_request(
            "POST", f"{DOMAINS}/{domain_id}/cache/errors/cache-ttl", {"ttl": ttl}
        )

    async def purge_cache(self, domain_id: int, data: Optional[RequestData] = None) -> Envelope:
        """
        Purge the edge cache.

        Args:
            domain_id: Domain ID
            data: PurgeCacheRequest; purge_all is sent as 1/0 and empty
                  url/tag/prefix lists are omitted
        """
        request: Mapping[str, Any] = to_plain_data(data) or {}
        return await self.client.auth_request(
            "POST",
            f"{DOMAINS}/{domain_id}/cache/edge/purge-cache",
            {
                "purge_all": self._flag(request.get("purge_all")),
                "urls": request.get("urls"),
                "tags": request.get("tags"),
                "prefixes": request.get("prefixes"),
            }
        )

    # ==================== Acceleration ====================

    async def set_minify(
        self,
        domain_id: int,
        html: bool = False,
        css: bool = False,
        js: bool = False
    ) -> Envelope:
        """Toggle HTML / CSS / JS minification"""
        return await self.client.auth_request(
            "POST",
            f"{DOMAINS}/{domain_id}/acceleration/assets/minify",
            {"html": self._flag(html), "css": self._flag(css), "js": self._flag(js)}
        )

    async def set_image_optimization(self, domain_id: int, enabled: bool) -> Envelope:
        """WebP conversion"""
        return await self.client.auth_request(
            "POST", f"{DOMAINS}/{domain_id}/acceleration/images/optimize", {"enabled": self._flag(enabled)}
        )

    async def set_image_resize(self, domain_id: int, enabled: bool) -> Envelope:
        return await self.client.auth_request(
            "POST", f"{DOMAINS}/{domain_id}/acceleration/images/resize", {"enabled": self._flag(enabled)}
        )

    # ==================== DDoS Protection ====================

    async def get_ddos_settings(self, domain_id: int) -> Envelope:
        return await self.client.auth_request("GET", f"{DOMAINS}/{domain_id}/ddos")

    async def set_ddos_settings(self, domain_id: int, settings: RequestData) -> Envelope:
        """Partial DdosSettings update"""
        return await self.client.auth_request("POST", f"{DOMAINS}/{domain_id}/ddos", settings)

    async def set_captcha_module(
        self,
        domain_id: int,
        module: Literal["recaptcha", "hcaptcha", "turnstile", "arcaptcha"]
    ) -> Envelope:
        return await self.client.auth_request(
            "POST", f"{DOMAINS}/{domain_id}/ddos/captcha-module", {"module": module}
        )

    async def set_captcha_ttl(self, domain_id: int, ttl: int) -> Envelope:
        return await self.client.auth_request(
            "POST", f"{DOMAINS}/{domain_id}/ddos/set-ttl/captcha", {"ttl": ttl}
        )

    async def set_cookie_challenge_ttl(self, domain_id: int, ttl: int) -> Envelope:
        return await self.client.auth_request(
            "POST", f"{DOMAINS}/{domain_id}/ddos/set-ttl/cookie", {"ttl": ttl}
        )

    async def set_js_challenge_ttl(self, domain_id: int, ttl: int) -> Envelope:
        return await self.client.auth_request(
            "POST", f"{DOMAINS}/{domain_id}/ddos/set-ttl/js", {"ttl": ttl}
        )

    # ==================== Firewall ====================

    async def get_firewall_configs(self, domain_id: int) -> Envelope:
        return await self.client.auth_request("GET", f"{DOMAINS}/{domain_id}/firewall")

    async def set_firewall_configs(self, domain_id: int, data: RequestData) -> Envelope:
        return await self.client.auth_request("POST", f"{DOMAINS}/{domain_id}/firewall", data)

    # ==================== WAF ====================

    async def get_waf_settings(self, domain_id: int) -> Envelope:
        return await self.client.auth_request("GET", f"{DOMAINS}/{domain_id}/waf")

    async def set_waf_settings(self, domain_id: int, settings: RequestData) -> Envelope:
        return await self.client.auth_request("PUT", f"{DOMAINS}/{domain_id}/waf", settings)

    async def get_waf_layers(self, domain_id: int) -> Envelope:
        """WAF rulesets"""
        return await self.client.auth_request("GET", f"{DOMAINS}/{domain_id}/waf/layers")

    async def get_waf_rules(self, domain_id: int) -> Envelope:
        return await self.client.auth_request("GET", f"{DOMAINS}/{domain_id}/waf/rules")

    async def get_disabled_waf_rules(self, domain_id: int) -> Envelope:
        return await self.client.auth_request("GET", f"{DOMAINS}/{domain_id}/waf/disabled-rules")

    async def switch_waf_group(self, domain_id: int, group_id: str, enabled: bool) -> Envelope:
        return await self.client.auth_request(
            "PUT",
            f"{DOMAINS}/{domain_id}/waf/switch-group",
            {"group_id": group_id, "enabled": self._flag(enabled)}
        )

    async def switch_waf_rule(self, domain_id: int, rule_id: str, enabled: bool) -> Envelope:
        return await self.client.auth_request(
            "PUT",
            f"{DOMAINS}/{domain_id}/waf/switch-rule",
            {"rule_id": rule_id, "enabled": self._flag(enabled)}
        )

    # ==================== Page Rules ====================

    async def get_page_rules(self, domain_id: int) -> Envelope:
        return await self.client.auth_request("GET", f"{DOMAINS}/{domain_id}/paths")

    async def get_page_rules_waf(self, domain_id: int) -> Envelope:
        return await self.client.auth_request("GET", f"{DOMAINS}/{domain_id}/paths/waf")

    async def get_page_rules_ratelimit(self, domain_id: int) -> Envelope:
        return await self.client.auth_request("GET", f"{DOMAINS}/{domain_id}/paths/ratelimit")

    async def get_page_rules_ddos(self, domain_id: int) -> Envelope:
        return await self.client.auth_request("GET", f"{DOMAINS}/{domain_id}/paths/ddos")

    async def get_page_rules_firewall(self, domain_id: int) -> Envelope:
        return await self.client.auth_request("GET", f"{DOMAINS}/{domain_id}/paths/firewall")

    async def create_page_rule_path(self, domain_id: int, data: RequestData) -> Envelope:
        return await self.client.auth_request("POST", f"{DOMAINS}/{domain_id}/paths", data)

    async def set_page_rule_priority(self, domain_id: int, path_id: int, priority: int) -> Envelope:
        return await self.client.auth_request(
            "PUT", f"{DOMAINS}/{domain_id}/paths/{path_id}", {"priority": priority}
        )

    async def delete_page_rule_path(self, domain_id: int, path_id: int) -> Envelope:
        return await self.client.auth_request("DELETE", f"{DOMAINS}/{domain_id}/paths/{path_id}")

    async def create_rule(self, domain_id: int, path_id: int, data: RequestData) -> Envelope:
        """
        Create or replace a rule on a page rule path.

        Args:
            domain_id: Domain ID
            path_id: Page rule path ID
            data: CreateRuleRequest; settings are sent as settings[key]=value
        """
        return await self.client.auth_request(
            "POST", f"{DOMAINS}/{domain_id}/paths/{path_id}/rules", data
        )

    async def delete_rule(self, domain_id: int, path_id: int, rule_type: str) -> Envelope:
        return await self.client.auth_request(
            "DELETE", f"{DOMAINS}/{domain_id}/paths/{path_id}/rules/{rule_type}"
        )

    async def set_direct_rule(self, domain_id: int, section: str, settings: Dict[str, Any]) -> Envelope:
        """Set a section rule for the whole domain, without a path"""
        return await self.client.auth_request(
            "POST", f"{DOMAINS}/{domain_id}/paths/direct-rule/{section}", settings
        )

    # ==================== Clusters (Load Balancing) ====================

    async def get_clusters(self, domain_id: int) -> Envelope:
        """Origin pools"""
        return await self.client.auth_request("GET", f"{DOMAINS}/{domain_id}/cluster")

    async def get_cluster_assignments(self, domain_id: int) -> Envelope:
        """Which paths use which clusters"""
        return await self.client.auth_request("GET", f"{DOMAINS}/{domain_id}/cluster/assignments")

    async def add_cluster(self, domain_id: int, data: RequestData) -> Envelope:
        return await self.client.auth_request("POST", f"{DOMAINS}/{domain_id}/cluster", data)

    async def update_cluster(self, domain_id: int, cluster_id: int, data: RequestData) -> Envelope:
        return await self.client.auth_request("PUT", f"{DOMAINS}/{domain_id}/cluster/{cluster_id}", data)

    async def delete_cluster(self, domain_id: int, cluster_id: int) -> Envelope:
        return await self.client.auth_request("DELETE", f"{DOMAINS}/{domain_id}/cluster/{cluster_id}")

    async def add_server_to_cluster(self, domain_id: int, cluster_id: int, data: RequestData) -> Envelope:
        return await self.client.auth_request(
            "POST", f"{DOMAINS}/{domain_id}/cluster/{cluster_id}/servers", data
        )

    async def remove_server_from_cluster(self, domain_id: int, cluster_id: int, server_id: int) -> Envelope:
        return await self.client.auth_request(
            "DELETE", f"{DOMAINS}/{domain_id}/cluster/{cluster_id}/servers/{server_id}"
        )

    # ==================== Log Forwarders ====================

    async def get_log_forwarders(self, domain_id: int) -> Envelope:
        return await self.client.auth_request("GET", f"{DOMAINS}/{domain_id}/log-forwarders")

    async def add_log_forwarder(self, domain_id: int, data: RequestData) -> Envelope:
        return await self.client.auth_request("POST", f"{DOMAINS}/{domain_id}/log-forwarders", data)

    async def update_log_forwarder(self, domain_id: int, logger_id: int, data: RequestData) -> Envelope:
        return await self.client.auth_request(
            "PUT", f"{DOMAINS}/{domain_id}/log-forwarders/{logger_id}", data
        )

    async def delete_log_forwarder(self, domain_id: int, logger_id: int) -> Envelope:
        return await self.client.auth_request("DELETE", f"{DOMAINS}/{domain_id}/log-forwarders/{logger_id}")

    # ==================== Custom Pages ====================

    async def get_custom_pages(self, domain_id: int) -> Envelope:
        return await self.client.auth_request("GET", f"{DOMAINS}/{domain_id}/custom-pages")

    async def set_custom_pages(self, domain_id: int, pages: RequestData) -> Envelope:
        """Set custom error pages (CustomPages: e403, e429, e502, ...)"""
        return await self.client.auth_request("PUT", f"{DOMAINS}/{domain_id}/custom-pages", pages)

    async def delete_custom_pages(self, domain_id: int) -> Envelope:
        """Reset error pages to the defaults"""
        return await self.client.auth_request("DELETE", f"{DOMAINS}/{domain_id}/custom-pages")

    # ==================== Plans ====================

    async def get_plans(self, domain_id: Optional[int] = None) -> Envelope:
        """
        List CDN plans.

        Args:
            domain_id: Optional domain to list upgrade options for
        """
        return await self.client.auth_request(
            "GET", PLANS, {"domain_id": domain_id} if domain_id else None
        )

    async def change_plan(self, domain_id: int, plan_id: int) -> Envelope:
        return await self.client.auth_request(
            "POST", PLANS, {"domain_id": domain_id, "plan_id": plan_id}
        )
