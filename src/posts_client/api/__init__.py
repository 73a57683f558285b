"""
API Client Module

Provides the async HTTP client for the JSONPlaceholder posts API and the
mapping between its wire records and domain models.
"""

from .client import PostsAPIClient
from .mapper import to_domain, to_domain_list, to_wire

__all__ = ["PostsAPIClient", "to_domain", "to_domain_list", "to_wire"]
