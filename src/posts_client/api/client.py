"""
API Client Module

Async HTTP client for the JSONPlaceholder ``/posts`` resource. Performs the
five CRUD calls and JSON (de)serialization; every failure surfaces as a
single ``TransportError``.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from ..config import APIConfig, config
from ..errors import TransportError
from ..models import NewPostRequest
from .mapper import to_wire


logger = logging.getLogger(__name__)


REQUIRED_FIELDS = ("id", "userId", "title", "body")


class PostsAPIClient:
    """
    HTTP client for the JSONPlaceholder posts API.

    Features:
    - Injectable ``httpx.AsyncClient`` (one is built from config otherwise)
    - Single attempt per call, no retries
    - Uniform ``TransportError`` for network, status and decoding failures
    """

    def __init__(
        self,
        http_client: Optional[httpx.AsyncClient] = None,
        api_config: Optional[APIConfig] = None
    ):
        """
        Initialize the API client.

        Args:
            http_client: Client to send requests with. Its ``base_url`` must
                point at the API origin. Ownership stays with the caller.
            api_config: API settings (uses the global config if None).
        """
        self.api_config = api_config or config.api
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(
            base_url=self.api_config.base_url,
            timeout=self.api_config.timeout_seconds,
            headers={"Accept": "application/json"}
        )
        logger.info(f"PostsAPIClient initialized (base_url: {self._http.base_url})")

    @property
    def base_url(self) -> str:
        return str(self._http.base_url)

    async def __aenter__(self) -> "PostsAPIClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            await self._http.aclose()

    async def get_posts(self) -> List[Dict[str, Any]]:
        """
        GET /posts.

        Returns:
            List of wire records.

        Raises:
            TransportError: On any request, status or decoding failure.
        """
        data = await self._request_json("GET", self.api_config.posts_endpoint)
        if not isinstance(data, list):
            raise TransportError(f"Unexpected API response format: {type(data).__name__}")
        records = [self._require_record(item) for item in data]
        logger.debug(f"Received {len(records)} post records")
        return records

    async def get_post(self, post_id: int) -> Dict[str, Any]:
        """GET /posts/{id}. Raises TransportError on failure, including 404."""
        data = await self._request_json("GET", self.api_config.post_path(post_id))
        return self._require_record(data)

    async def create_post(self, request: NewPostRequest) -> Dict[str, Any]:
        """POST /posts. The returned record carries the server-assigned id."""
        data = await self._request_json(
            "POST",
            self.api_config.posts_endpoint,
            json=to_wire(request)
        )
        return self._require_record(data)

    async def update_post(self, post_id: int, request: NewPostRequest) -> Dict[str, Any]:
        """PUT /posts/{id}, replacing every field of the post."""
        data = await self._request_json(
            "PUT",
            self.api_config.post_path(post_id),
            json=to_wire(request)
        )
        return self._require_record(data)

    async def delete_post(self, post_id: int) -> bool:
        """
        DELETE /posts/{id}.

        A non-2xx status is not an error here; it is reported as ``False``.

        Returns:
            True if the server answered with a 2xx status.

        Raises:
            TransportError: If no response could be obtained.
        """
        response = await self._send("DELETE", self.api_config.post_path(post_id))
        if not response.is_success:
            logger.warning(f"Delete of post {post_id} returned HTTP {response.status_code}")
        return response.is_success

    async def _send(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        logger.debug(f"{method} {path}")
        try:
            return await self._http.request(method, path, **kwargs)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportError(str(e)) from e
        except Exception as e:
            # e.g. a closed client or a transport raising OSError
            logger.error(f"Unexpected error on {method} {path}: {e!r}")
            raise TransportError(str(e)) from e

    async def _request_json(self, method: str, path: str, **kwargs: Any) -> Any:
        response = await self._send(method, path, **kwargs)

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise TransportError(str(e), status_code=response.status_code) from e

        try:
            return response.json()
        except ValueError as e:
            raise TransportError(
                f"Invalid JSON in response: {e}",
                status_code=response.status_code
            ) from e

    @staticmethod
    def _require_record(data: Any) -> Dict[str, Any]:
        if not isinstance(data, dict):
            raise TransportError(f"Unexpected post record: {type(data).__name__}")
        missing = [name for name in REQUIRED_FIELDS if name not in data]
        if missing:
            raise TransportError(f"Post record missing fields: {', '.join(missing)}")
        return data
