"""A scope inside which call stack symbols can be resolved."""

from __future__ import annotations

import threading

_lock = threading.Lock()
_depth = 0


def is_active() -> bool:
    """Whether a call stack access scope is currently open."""
    with _lock:
        return _depth > 0


class CallStackAccessScope:
    """Context manager that enables symbol resolution for stack traces."""

    def __enter__(self) -> CallStackAccessScope:
        global _depth
        with _lock:
            _depth += 1
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        global _depth
        with _lock:
            _depth = max(_depth - 1, 0)