"""
Root pytest configuration file for MCP Jira tests.
"""

import io
import json

import pytest
from requests import Response


@pytest.fixture
def anyio_backend():
    """Run anyio-marked tests on asyncio only."""
    return "asyncio"


def make_response(
    status_code: int = 200,
    body: object = None,
    text: str | None = None,
    reason: str = "OK",
) -> Response:
    """Build a real requests Response streaming a JSON (or raw text) body."""
    response = Response()
    response.status_code = status_code
    response.reason = reason
    response.encoding = "utf-8"
    if text is None:
        text = "" if body is None else json.dumps(body)
    response.raw = io.BytesIO(text.encode("utf-8"))
    return response


@pytest.fixture
def response_factory():
    """Expose make_response to tests as a fixture."""
    return make_response
