"""
API Layer - transport, form encoding and errors shared by all resource modules
"""

from mizbancloud.api.exceptions import MizbanCloudError
from mizbancloud.api.form_encoding import encode_form, flatten_form
from mizbancloud.api.http_client import (
    AUTH_SERVICE,
    CDN_SERVICE,
    CLOUD_SERVICE,
    HttpClient,
    SessionState,
)

__all__ = [
    # Transport
    "HttpClient",
    "SessionState",
    "AUTH_SERVICE",
    "CDN_SERVICE",
    "CLOUD_SERVICE",
    
    # Encoding
    "encode_form",
    "flatten_form",
    
    # Exceptions
    "MizbanCloudError",
]
