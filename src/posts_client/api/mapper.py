"""
Entity Mapper Module

Converts between JSONPlaceholder wire records and domain models.
"""

from typing import Any, Dict, Iterable, List

from ..models import NewPostRequest, Post


def to_domain(record: Dict[str, Any]) -> Post:
    """
    Convert a wire record into a Post.

    Args:
        record: Decoded JSON object with ``id``, ``userId``, ``title`` and ``body``.

    Returns:
        The equivalent Post, fields copied verbatim.
    """
    return Post(
        id=record["id"],
        user_id=record["userId"],
        title=record["title"],
        body=record["body"]
    )


def to_domain_list(records: Iterable[Dict[str, Any]]) -> List[Post]:
    """Convert wire records into Posts, preserving order."""
    return [to_domain(record) for record in records]


def to_wire(request: NewPostRequest) -> Dict[str, Any]:
    """Build the JSON body for a create or update request."""
    return {
        "userId": request.user_id,
        "title": request.title,
        "body": request.body,
    }
