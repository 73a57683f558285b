"""
Domain Models

Immutable value objects used throughout the client, independent of the
wire format spoken by the API.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Post:
    """Represents a post. Identity is ``id``, assigned by the server."""
    id: int
    user_id: int
    title: str
    body: str


@dataclass(frozen=True)
class NewPostRequest:
    """Payload for create and update requests (a post without an id)."""
    user_id: int
    title: str
    body: str
