"""
Error type raised for every MizbanCloud API failure
"""

from typing import Any, Dict, List, Optional


class MizbanCloudError(Exception):
    """
    Normalized error for all API failures.
    
    Covers application-level rejections (``success: false`` with a 2xx status),
    backend failures (non-2xx status), timeouts (status 408) and network
    failures (status 0). ``response`` holds the raw error envelope.
    """
    
    def __init__(self, message: str, status_code: int, response: Optional[Dict[str, Any]] = None):
        self.message = message
        self.status_code = status_code
        self.response = response if response is not None else {"success": False, "message": message}
        super().__init__(self.message)
    
    @property
    def fields(self) -> Optional[List[str]]:
        return self.response.get("fields")
    
    @property
    def invalid_fields(self) -> Optional[List[str]]:
        return self.response.get("invalidFields")
    
    @property
    def missing_fields(self) -> Optional[List[str]]:
        return self.response.get("missing_fields")
    
    def __str__(self):
        if self.status_code:
            return f"MizbanCloudError (HTTP {self.status_code}): {self.message}"
        return f"MizbanCloudError: {self.message}"
    
    def __repr__(self):
        return f"MizbanCloudError(message={self.message!r}, status_code={self.status_code!r})"
