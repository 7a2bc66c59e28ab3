"""
Shared fixtures: a MizbanCloud client wired to an in-memory httpx transport
"""

import os
from typing import Any, Callable, List, Optional

import httpx
import pytest

from mizbancloud import MizbanCloud
from mizbancloud.utils.config import reset_settings

from helpers import OK_ENVELOPE


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate every test from MIZBANCLOUD_* variables and the settings singleton"""
    for key in list(os.environ):
        if key.upper().startswith("MIZBANCLOUD_"):
            monkeypatch.delenv(key)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def captured() -> List[httpx.Request]:
    """Requests seen by the mock transport, in send order"""
    return []


@pytest.fixture
def make_client(captured) -> Callable[..., MizbanCloud]:
    """
    Build a MizbanCloud client backed by httpx.MockTransport.

    Factory args:
        response: JSON body returned with HTTP 200 (default OK_ENVELOPE)
        handler: Optional callable(request) -> httpx.Response replacing the default
        **options: ClientConfig fields
    """

    def _make(
        response: Optional[Any] = None,
        handler: Optional[Callable[[httpx.Request], Any]] = None,
        **options: Any
    ) -> MizbanCloud:
        def _handle(request: httpx.Request):
            captured.append(request)
            if handler is not None:
                return handler(request)
            return httpx.Response(200, json=OK_ENVELOPE if response is None else response)

        return MizbanCloud(transport=httpx.MockTransport(_handle), **options)

    return _make
