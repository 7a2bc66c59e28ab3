"""
Request inspection helpers shared by the test modules
"""

from typing import List, Tuple
from urllib.parse import parse_qsl

import httpx


OK_ENVELOPE = {"success": True, "message": "OK", "data": []}


def form_pairs(request: httpx.Request) -> List[Tuple[str, str]]:
    """Decode a recorded form body into ordered (key, value) pairs"""
    return parse_qsl(request.content.decode(), keep_blank_values=True)


def query_pairs(request: httpx.Request) -> List[Tuple[str, str]]:
    return list(request.url.params.multi_items())
