"""
HTTP Post Repository Module

Repository backed by the posts API client. Each operation makes exactly one
transport call and normalizes the outcome into a ``Resource``.
"""

import logging
from typing import List

from ..api.client import PostsAPIClient
from ..api.mapper import to_domain, to_domain_list
from ..errors import TransportError
from ..models import NewPostRequest, Post
from ..resource import Error, Resource, Success
from .base import PostRepository


logger = logging.getLogger(__name__)


GET_ALL_FALLBACK = "An unexpected error occurred"
GET_ONE_FALLBACK = "Failed to fetch post"
CREATE_FALLBACK = "Failed to create post"
UPDATE_FALLBACK = "Failed to update post"
DELETE_FALLBACK = "Failed to delete post"


def _error(e: TransportError, fallback: str) -> Error:
    return Error(e.message or fallback)


class HttpPostRepository(PostRepository):
    """
    Post repository over HTTP.

    No retries, timeouts beyond the client's own, or backoff: a single
    attempt per call.
    """

    def __init__(self, client: PostsAPIClient):
        """
        Initialize the repository.

        Args:
            client: Transport client to issue requests with.
        """
        self.client = client
        logger.info("HttpPostRepository initialized")

    async def get_all_posts(self) -> Resource[List[Post]]:
        try:
            records = await self.client.get_posts()
        except TransportError as e:
            logger.warning(f"Fetching posts failed: {e}")
            return _error(e, GET_ALL_FALLBACK)

        posts = to_domain_list(records)
        logger.info(f"Fetched {len(posts)} posts successfully")
        return Success(posts)

    async def get_post_by_id(self, post_id: int) -> Resource[Post]:
        try:
            record = await self.client.get_post(post_id)
        except TransportError as e:
            logger.warning(f"Fetching post {post_id} failed: {e}")
            return _error(e, GET_ONE_FALLBACK)

        return Success(to_domain(record))

    async def create_post(self, user_id: int, title: str, body: str) -> Resource[Post]:
        request = NewPostRequest(user_id=user_id, title=title, body=body)
        try:
            record = await self.client.create_post(request)
        except TransportError as e:
            logger.warning(f"Creating post failed: {e}")
            return _error(e, CREATE_FALLBACK)

        post = to_domain(record)
        logger.info(f"Created post {post.id}")
        return Success(post)

    async def update_post(
        self, post_id: int, user_id: int, title: str, body: str
    ) -> Resource[Post]:
        request = NewPostRequest(user_id=user_id, title=title, body=body)
        try:
            record = await self.client.update_post(post_id, request)
        except TransportError as e:
            logger.warning(f"Updating post {post_id} failed: {e}")
            return _error(e, UPDATE_FALLBACK)

        logger.info(f"Updated post {post_id}")
        return Success(to_domain(record))

    async def delete_post(self, post_id: int) -> Resource[bool]:
        try:
            deleted = await self.client.delete_post(post_id)
        except TransportError as e:
            logger.warning(f"Deleting post {post_id} failed: {e}")
            return _error(e, DELETE_FALLBACK)

        logger.info(f"Delete of post {post_id} confirmed: {deleted}")
        return Success(deleted)
