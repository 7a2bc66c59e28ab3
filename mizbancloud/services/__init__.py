"""
Resource modules - one facade per API area, all sharing one HttpClient
"""

from mizbancloud.services.base import BaseService
from mizbancloud.services.auth import AuthService
from mizbancloud.services.statics import StaticsService
from mizbancloud.services.cdn import CdnService
from mizbancloud.services.cloud import CloudService

__all__ = [
    "BaseService",
    "AuthService",
    "StaticsService",
    "CdnService",
    "CloudService",
]
