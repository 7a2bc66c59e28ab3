"""
MizbanCloud SDK
Async client for the MizbanCloud CDN and Cloud APIs
"""

from mizbancloud.api import HttpClient, MizbanCloudError, SessionState
from mizbancloud.client import MizbanCloud
from mizbancloud.factory import create_client
from mizbancloud.models import ApiError, ApiResponse, ClientConfig, PaginatedResponse, RequestOptions
from mizbancloud.services import AuthService, CdnService, CloudService, StaticsService

__version__ = "1.0.0"

__all__ = [
    # Client
    "MizbanCloud",
    "create_client",
    
    # Transport
    "HttpClient",
    "SessionState",
    
    # Errors
    "MizbanCloudError",
    
    # Modules
    "AuthService",
    "CdnService",
    "CloudService",
    "StaticsService",
    
    # Core models
    "ApiError",
    "ApiResponse",
    "ClientConfig",
    "PaginatedResponse",
    "RequestOptions",
]
