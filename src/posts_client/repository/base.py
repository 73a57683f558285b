"""Repository interface - Abstract base class for post data access."""

from abc import ABC, abstractmethod
from typing import List

from ..models import Post
from ..resource import Resource


class PostRepository(ABC):
    """Interface for post repository operations. Failures are returned, never raised."""

    @abstractmethod
    async def get_all_posts(self) -> Resource[List[Post]]:
        """Get all posts."""
        pass

    @abstractmethod
    async def get_post_by_id(self, post_id: int) -> Resource[Post]:
        """Get a single post by ID."""
        pass

    @abstractmethod
    async def create_post(self, user_id: int, title: str, body: str) -> Resource[Post]:
        """Create a new post; the server assigns its ID."""
        pass

    @abstractmethod
    async def update_post(
        self, post_id: int, user_id: int, title: str, body: str
    ) -> Resource[Post]:
        """Replace every field of an existing post."""
        pass

    @abstractmethod
    async def delete_post(self, post_id: int) -> Resource[bool]:
        """Delete a post; ``Success(False)`` if the server did not confirm."""
        pass
