"""
Presentation Module

Provides the screen state, its reducer, the observable store and the view
model driving them.
"""

from .state import (
    CreateFinished,
    CreateStarted,
    FetchFinished,
    FetchStarted,
    MessagesCleared,
    ViewState,
    reduce,
)
from .store import StateStore
from .view_model import PostViewModel, build_view_model

__all__ = [
    "ViewState",
    "reduce",
    "FetchStarted",
    "FetchFinished",
    "CreateStarted",
    "CreateFinished",
    "MessagesCleared",
    "StateStore",
    "PostViewModel",
    "build_view_model",
]
