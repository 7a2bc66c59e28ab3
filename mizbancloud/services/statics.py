"""
Statics Service
Read-only catalog data: datacenters, operating systems, cache times, sliders
"""

from mizbancloud.services.base import BaseService, Envelope


class StaticsService(BaseService):
    
    async def list_datacenters(self) -> Envelope:
        """List datacenters available for server creation"""
        return await self.client.auth_request("GET", "/api/v1/static/datacenters")
    
    async def list_operating_systems(self) -> Envelope:
        """List operating systems available for server creation"""
        return await self.client.auth_request("GET", "/api/v1/static/os-list")
    
    async def get_cache_times(self) -> Envelope:
        """Predefined cache TTL options"""
        return await self.client.auth_request("GET", "/api/v1/static/cache-times")
    
    async def get_sliders(self) -> Envelope:
        return await self.client.auth_request("GET", "/api/v1/static/sliders")
