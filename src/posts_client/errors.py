"""Exception types raised inside the posts client."""

from typing import Optional


class PostsClientError(Exception):
    """Base posts client error."""

    pass


class TransportError(PostsClientError):
    """Network, HTTP status or decoding failure talking to the API."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)
