"""
Auth Service
API token management and wallet info
"""

from typing import Optional

from mizbancloud.services.base import BaseService, Envelope


class AuthService(BaseService):
    """Token helpers operate on the shared session, so every module sees the change"""
    
    def set_api_token(self, token: str) -> None:
        """
        Set the API token. All subsequent requests include it.
        
        Args:
            token: API token issued by the MizbanCloud panel
        """
        self.client.set_token(token)
    
    def get_api_token(self) -> Optional[str]:
        return self.client.get_token()
    
    def clear_api_token(self) -> None:
        self.client.set_token(None)
    
    async def get_wallet(self) -> Envelope:
        """
        Get wallet balance and info.
        
        Returns:
            Envelope whose data is a Wallet
        """
        return await self.client.auth_request("GET", "/api/admin-temp-v1/financial/wallet")
