"""
Posts Client

Async client for the JSONPlaceholder posts API, layered as transport,
repository, use cases and a view-state reducer.
"""

from .models import NewPostRequest, Post
from .resource import Error, Loading, Resource, Success

__version__ = "0.1.0"

__all__ = ["Post", "NewPostRequest", "Resource", "Success", "Error", "Loading"]
