"""
Shared models: response envelopes, client configuration and request options
"""

from typing import Any, Dict, Generic, List, Literal, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field


T = TypeVar("T")

Language = Literal["en", "fa"]


class MizbanModel(BaseModel):
    """Base for API data types; unknown fields sent by the backend are kept"""
    
    model_config = ConfigDict(extra="allow", populate_by_name=True)


class ApiResponse(MizbanModel, Generic[T]):
    """
    Response envelope returned by every endpoint.
    
    Example:
        envelope = await client.cdn.list_domains()
        domains = ApiResponse[List[Domain]].model_validate(envelope).data
    """
    
    success: bool
    message: str = ""
    data: Optional[T] = None
    id: Optional[int] = None
    count: Optional[int] = None
    total: Optional[int] = None
    page: Optional[int] = None


class PaginatedResponse(ApiResponse[List[T]], Generic[T]):
    """Envelope for list endpoints that report pagination"""
    
    count: int
    total: int
    page: int


class ApiError(MizbanModel):
    """Error envelope, including field validation details when present"""
    
    success: Literal[False] = False
    message: str
    data: Optional[Any] = None
    fields: Optional[List[str]] = None
    invalid_fields: Optional[List[str]] = Field(default=None, alias="invalidFields")
    missing_fields: Optional[List[str]] = None


class ClientConfig(BaseModel):
    """
    Constructor options for HttpClient / MizbanCloud.
    
    Timeout is in milliseconds; headers are merged over the SDK defaults.
    """
    
    model_config = ConfigDict(extra="forbid")
    
    auth_base_url: str = "http://localhost:8003"
    cdn_base_url: str = "http://localhost:8000"
    cloud_base_url: str = "http://localhost:8001"
    timeout: int = Field(default=30000, gt=0)
    language: Language = "en"
    headers: Dict[str, str] = Field(default_factory=dict)


class RequestOptions(BaseModel):
    """Per-call overrides: extra headers, timeout (ms) and query params"""
    
    model_config = ConfigDict(extra="forbid")
    
    headers: Optional[Dict[str, str]] = None
    timeout: Optional[int] = Field(default=None, gt=0)
    params: Optional[Dict[str, Any]] = None


class TokenInfo(MizbanModel):
    token: str
    expires_at: Optional[str] = Field(default=None, alias="expiresAt")
    type: Optional[Literal["USER", "ADMIN", "API_KEY"]] = None
