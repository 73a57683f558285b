"""Use case for getting all posts."""

from typing import List

from ..models import Post
from ..repository.base import PostRepository
from ..resource import Resource


class GetAllPostsUseCase:
    """Fetch every post. Adds no behaviour on top of the repository."""

    def __init__(self, repository: PostRepository):
        self.repository = repository

    async def __call__(self) -> Resource[List[Post]]:
        return await self.repository.get_all_posts()
