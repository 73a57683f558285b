"""
Repository Module

Provides the post repository contract and its HTTP-backed implementation.
"""

from .base import PostRepository
from .http_repository import HttpPostRepository

__all__ = ["PostRepository", "HttpPostRepository"]
