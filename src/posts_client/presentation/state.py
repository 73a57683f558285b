"""
View State Module

Screen state and the pure reducer that applies operation outcomes to it.
Every transition produces a new ``ViewState``; nothing is mutated in place.
"""

from dataclasses import dataclass, replace
from typing import List, Optional, Tuple, Union

from ..models import Post
from ..resource import Error, Loading, Resource, Success


FETCH_ERROR_FALLBACK = "Unknown error"
CREATE_ERROR_FALLBACK = "Failed to create post"


@dataclass(frozen=True)
class ViewState:
    """Single source of truth for the posts screen."""
    posts: Tuple[Post, ...] = ()
    selected_post: Optional[Post] = None
    is_loading: bool = False
    message: str = ""  # Success message
    error: str = ""  # Error message


@dataclass(frozen=True)
class FetchStarted:
    pass


@dataclass(frozen=True)
class FetchFinished:
    result: Resource[List[Post]]


@dataclass(frozen=True)
class CreateStarted:
    pass


@dataclass(frozen=True)
class CreateFinished:
    result: Resource[Post]


@dataclass(frozen=True)
class MessagesCleared:
    pass


Event = Union[FetchStarted, FetchFinished, CreateStarted, CreateFinished, MessagesCleared]


def reduce(state: ViewState, event: Event) -> ViewState:
    """
    Apply one event to the state.

    Args:
        state: Current state.
        event: What happened.

    Returns:
        The next state.
    """
    if isinstance(event, (FetchStarted, CreateStarted)):
        # message/error are left alone until the outcome lands
        return replace(state, is_loading=True)

    if isinstance(event, FetchFinished):
        return _apply_fetch_result(state, event.result)

    if isinstance(event, CreateFinished):
        return _apply_create_result(state, event.result)

    if isinstance(event, MessagesCleared):
        return replace(state, message="", error="")

    raise TypeError(f"Unknown event: {event!r}")


def _apply_fetch_result(state: ViewState, result: Resource[List[Post]]) -> ViewState:
    if isinstance(result, Success):
        posts = tuple(result.data or ())
        return replace(
            state,
            posts=posts,
            is_loading=False,
            message=f"Loaded {len(posts)} posts",
            error=""
        )
    if isinstance(result, Error):
        # Previously loaded posts are kept
        return replace(
            state,
            is_loading=False,
            error=result.message or FETCH_ERROR_FALLBACK,
            message=""
        )
    if isinstance(result, Loading):
        return replace(state, is_loading=True)
    raise TypeError(f"Unknown result: {result!r}")


def _apply_create_result(state: ViewState, result: Resource[Post]) -> ViewState:
    if isinstance(result, Success):
        # The list is not touched; only an explicit fetch refreshes it
        return replace(
            state,
            selected_post=result.data,
            is_loading=False,
            message=f"Created post successfully! ID: {getattr(result.data, 'id', None)}",
            error=""
        )
    if isinstance(result, Error):
        return replace(
            state,
            is_loading=False,
            error=result.message or CREATE_ERROR_FALLBACK,
            message=""
        )
    if isinstance(result, Loading):
        return state
    raise TypeError(f"Unknown result: {result!r}")
