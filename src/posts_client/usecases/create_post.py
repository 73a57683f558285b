"""
Create Post Use Case

Validates user input before a post is sent to the repository. Validation
failures are returned as ``Error`` without any network call.
"""

import logging

from ..models import Post
from ..repository.base import PostRepository
from ..resource import Error, Resource


logger = logging.getLogger(__name__)


EMPTY_TITLE_MESSAGE = "Title cannot be empty"
EMPTY_BODY_MESSAGE = "Body cannot be empty"


class CreatePostUseCase:
    """
    Create a new post.

    Title is checked before body; the first failing check wins.
    """

    def __init__(self, repository: PostRepository):
        self.repository = repository

    async def __call__(self, user_id: int, title: str, body: str) -> Resource[Post]:
        """
        Validate and create a post.

        Args:
            user_id: Author of the post.
            title: Post title; must not be blank.
            body: Post body; must not be blank.

        Returns:
            ``Success(post)`` with the server-assigned id, or ``Error``.
        """
        if not title.strip():
            logger.info("Rejected post: empty title")
            return Error(EMPTY_TITLE_MESSAGE)
        if not body.strip():
            logger.info("Rejected post: empty body")
            return Error(EMPTY_BODY_MESSAGE)

        return await self.repository.create_post(user_id, title, body)
