"""Path generation algorithms for round patterns.

Provides the PathGenerator:
- Randomized self-avoiding walk with loop avoidance and one-step lookahead
- Bounded retries and backtracking
- Snake (boustrophedon) fallback when the search budget is exhausted
"""

from pattern_recall.generators.path_generator import (
    PathGenerator,
    snake_path,
    would_create_loop,
)

__all__ = [
    "PathGenerator",
    "snake_path",
    "would_create_loop",
]
