"""
Base Resource Module
Shared plumbing for the Auth / CDN / Cloud / Statics facades
"""

from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel

from mizbancloud.api.http_client import HttpClient


Envelope = Dict[str, Any]
RequestData = Union[BaseModel, Mapping[str, Any]]


class BaseService:
    """
    Stateless facade over the shared HttpClient.
    Holds only a reference to the transport; token and language live there.
    """
    
    def __init__(self, client: HttpClient):
        self.client = client
    
    @staticmethod
    def _flag(enabled: Optional[bool]) -> int:
        """Boolean switches are sent as 1/0"""
        return 1 if enabled else 0
    
    def get_service_name(self) -> str:
        """
        Get module name.
        Default implementation derives it from the class name.
        
        Returns:
            Module name string (e.g. "Cdn")
        """
        return self.__class__.__name__.replace("Service", "")
