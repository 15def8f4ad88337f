"""Data model classes for Pattern Recall.

- PatternPath: Immutable generated path with fallback/attempt metadata
- PathViolation: A broken path invariant (gap, touch, duplicate)
- Message / ToastMessage: User-facing messages
"""

from pattern_recall.model.message import (
    Message,
    MessageLevel,
    ToastMessage,
)
from pattern_recall.model.path import (
    PathViolation,
    PatternPath,
    adjacency_violations,
    duplicate_violations,
    touching_violations,
)

__all__ = [
    "PatternPath",
    "PathViolation",
    "adjacency_violations",
    "touching_violations",
    "duplicate_violations",
    "Message",
    "MessageLevel",
    "ToastMessage",
]
