"""Shared fixtures.

``StubAPI`` stands in for :class:`svgl_mcp.core.svgl_api.SvglAPI`.  It
records every URL the tools ask for and answers with a canned payload,
or raises a canned exception, so no test touches the real SVGL API.
"""

from __future__ import annotations

from typing import Any, List

import pytest

from svgl_mcp.core.config import API_BASE_URL
from svgl_mcp.tools import ToolDispatcher


class StubAPI:
    def __init__(self, payload: Any = None, error: Exception | None = None) -> None:
        self.base = API_BASE_URL
        self.payload = [] if payload is None else payload
        self.error = error
        self.urls: List[str] = []

    def fetch(self, endpoint: str) -> Any:
        self.urls.append(endpoint)
        if self.error is not None:
            raise self.error
        return self.payload


@pytest.fixture
def stub_api() -> StubAPI:
    return StubAPI()


@pytest.fixture
def dispatcher(stub_api: StubAPI) -> ToolDispatcher:
    return ToolDispatcher(stub_api)
