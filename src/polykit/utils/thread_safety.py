"""Thread safety utilities."""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any, TypeVar

T = TypeVar("T")

def wrap_with_lock(
    fn: Callable[..., T] | None,
    lock: Any = None,
) -> Callable[..., T] | None:
    """Wraps a function call with a lock.

    Used to guard lazily built shared state (such as oversized basis tables)
    so that concurrent first calls compute it exactly once.

    Args:
        fn: The function to guard. ``None`` is passed through.
        lock: Optional lock object; a fresh ``threading.RLock`` is used
            when omitted.

    Returns:
        The wrapped function, or ``None`` if ``fn`` is ``None``.
    """
    if fn is None:
        return None
    lk = lock if lock is not None else threading.RLock()

    def wrapped(*args: Any, **kwargs: Any) -> T:
        """Wrapped function call."""
        with lk:
            return fn(*args, **kwargs)

    wrapped.__wrapped__ = fn
    wrapped.__doc__ = fn.__doc__
    return wrapped
