"""
MizbanCloud SDK entry point
Wires one HttpClient to the Auth / CDN / Cloud / Statics modules
"""

from typing import Any, Optional

import httpx

from mizbancloud.api.http_client import HttpClient
from mizbancloud.models.common import ClientConfig, Language
from mizbancloud.services import AuthService, CdnService, CloudService, StaticsService


class MizbanCloud:
    """
    Client for the MizbanCloud CDN and Cloud APIs.
    
    Example:
        async with MizbanCloud(auth_base_url="https://auth.example.com") as client:
            client.set_token("your-api-token")
            domains = await client.cdn.list_domains()
            servers = await client.cloud.list_servers()
    """
    
    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        **options: Any
    ):
        """
        Initialize the SDK.
        
        Args:
            config: Optional ClientConfig
            transport: Optional httpx transport (e.g. httpx.MockTransport)
            **options: ClientConfig fields, applied over config
                       (auth_base_url, cdn_base_url, cloud_base_url,
                       timeout, language, headers)
        """
        if config is None:
            config = ClientConfig(**options)
        elif options:
            config = ClientConfig(**{**config.model_dump(), **options})
        
        self.http_client = HttpClient(config, transport=transport)
        
        # API token management, wallet
        self.auth = AuthService(self.http_client)
        # Domains, DNS, SSL, cache, security
        self.cdn = CdnService(self.http_client)
        # Servers, firewall, networks, volumes
        self.cloud = CloudService(self.http_client)
        # Datacenters, OS list, catalog data
        self.statics = StaticsService(self.http_client)
    
    def set_token(self, token: Optional[str]) -> None:
        """Set the API token used by all subsequent requests"""
        self.http_client.set_token(token)
    
    def get_token(self) -> Optional[str]:
        return self.http_client.get_token()
    
    def set_language(self, language: Language) -> None:
        self.http_client.set_language(language)
    
    def get_language(self) -> Language:
        return self.http_client.get_language()
    
    def is_authenticated(self) -> bool:
        """Check if an API token is set"""
        return self.http_client.get_token() is not None
    
    async def aclose(self) -> None:
        await self.http_client.aclose()
    
    async def __aenter__(self) -> "MizbanCloud":
        return self
    
    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
