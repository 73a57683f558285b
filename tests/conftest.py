"""
Shared test fixtures.

HTTP traffic is served by ``httpx.MockTransport``; nothing touches the network.
"""

import sys
from pathlib import Path
from typing import Callable

import httpx
import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from posts_client.config import config


Handler = Callable[[httpx.Request], httpx.Response]


def make_http_client(handler: Handler) -> httpx.AsyncClient:
    """Build an AsyncClient whose requests are answered by ``handler``."""
    return httpx.AsyncClient(
        transport=httpx.MockTransport(handler),
        base_url=config.api.base_url
    )


@pytest.fixture
def mock_http():
    """Factory for mock-transport HTTP clients."""
    return make_http_client


@pytest.fixture
def post_records():
    """Wire records as returned by GET /posts."""
    return [
        {"id": 1, "userId": 1, "title": "sunt aut facere", "body": "quia et suscipit"},
        {"id": 2, "userId": 1, "title": "qui est esse", "body": "est rerum tempore"},
        {"id": 3, "userId": 2, "title": "ea molestias", "body": "et iusto sed quo"},
    ]
