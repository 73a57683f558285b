"""
Use Cases Module

Single named business operations composed from validation and repository
calls.
"""

from .create_post import CreatePostUseCase, EMPTY_BODY_MESSAGE, EMPTY_TITLE_MESSAGE
from .get_all_posts import GetAllPostsUseCase

__all__ = [
    "CreatePostUseCase",
    "GetAllPostsUseCase",
    "EMPTY_BODY_MESSAGE",
    "EMPTY_TITLE_MESSAGE",
]
