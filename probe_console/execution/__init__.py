"""Suite execution components."""

from .engine import ExecutionEngine

__all__ = [
    "ExecutionEngine",
]
