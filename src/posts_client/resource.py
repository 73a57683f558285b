"""
Resource Module

Tagged result of one asynchronous operation: ``Success``, ``Error`` or
``Loading``. Exactly one variant describes an outcome; callers branch with
``isinstance``.
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar, Union


T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Operation completed and produced ``data``."""
    data: T

    is_success = True
    is_error = False
    is_loading = False


@dataclass(frozen=True)
class Error(Generic[T]):
    """Operation failed; ``message`` is human readable."""
    message: str
    data: Optional[T] = None

    is_success = False
    is_error = True
    is_loading = False


@dataclass(frozen=True)
class Loading:
    """In-flight marker. Never a final outcome."""

    is_success = False
    is_error = False
    is_loading = True


Resource = Union[Success[T], Error[T], Loading]
