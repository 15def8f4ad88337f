"""Pattern Recall - Memorize a path of tiles, then rebuild it from memory.

A small memory game featuring:
- A constrained self-avoiding walk generator producing unambiguous paths
- State machine-based round flow (ready, memorize, recall)
- Streamlit interface with a tile board and a result chart

Modules:
    core: Foundation classes (grid geometry, round timer)
    model: Data structures (PatternPath, user-facing messages)
    generators: Path generation (randomized search, snake fallback)
    ui: Streamlit interface components (state machine, controller, renderers)

Example:
    from pattern_recall.generators import PathGenerator
    from pattern_recall.ui.controller import GameController
"""
