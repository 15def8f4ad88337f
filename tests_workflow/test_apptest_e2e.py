"""End-to-End Integration Test using Streamlit AppTest Framework.

Simulates complete rounds by pressing the real buttons of app.py, so the
action layer (actions.py), the renderers and the controller are exercised
together.

Test Flow Mirrors Real User Interaction:
    1. Press Start -> pattern generated, MEMORIZE
    2. Press Recall -> pattern hidden, RECALL
    3. Click tiles -> CLEARED (all found) or FAILED (wrong tile)
    4. Press Play Again / Retry -> READY

Architecture:
- AppTest.from_file runs pattern_recall/app.py as a user would
- A seeded controller with a short path is injected into session_state before
  the first run so every run is reproducible and clicks stay few
"""

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from pattern_recall.generators.path_generator import PathGenerator
from pattern_recall.ui.controller import GameController

APP_PATH = str(Path(__file__).resolve().parent.parent / "pattern_recall" / "app.py")
PATH_LENGTH = 4
TIMEOUT_S = 30


# =============================================================================
# HELPERS
# =============================================================================


def _status(at: AppTest) -> str:
    """Status line rendered as '### LABEL' in the status bar."""
    labels = [m.value[4:] for m in at.markdown if m.value.startswith("### ")]
    assert labels, "Status line missing"
    return labels[0]


def _press(at: AppTest, key: str) -> AppTest:
    at.button(key=key).click().run(timeout=TIMEOUT_S)
    assert not at.exception, [e.value for e in at.exception]
    return at


def _controller(at: AppTest) -> GameController:
    return at.session_state["controller"]


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def app() -> AppTest:
    """App after its first run with a seeded, short-path controller."""
    at = AppTest.from_file(APP_PATH, default_timeout=TIMEOUT_S)
    at.session_state["controller"] = GameController(
        generator=PathGenerator(seed=21),
        path_length=PATH_LENGTH,
    )
    at.run()
    assert not at.exception
    return at


# =============================================================================
# TESTS
# =============================================================================


class TestAppRounds:
    def test_initial_render(self, app: AppTest) -> None:
        assert _status(app) == "READY"
        assert len([b for b in app.button if b.key and b.key.startswith("tile_")]) == 96
        assert all(app.button(key=f"tile_{i}").disabled for i in range(96))

    def test_winning_round(self, app: AppTest) -> None:
        _press(app, "btn_start")
        assert _status(app) == "MEMORIZE"
        pattern = _controller(app).pattern
        assert pattern is not None and len(pattern) == PATH_LENGTH

        _press(app, "btn_recall")
        assert _status(app) == "RECALL"

        for cell in pattern.cells:
            _press(app, f"tile_{cell}")

        assert _status(app) == "CLEARED"
        assert len(app.success) == 1

        _press(app, "btn_reset")
        assert _status(app) == "READY"
        assert _controller(app).pattern is None

    def test_wrong_tile_loses(self, app: AppTest) -> None:
        _press(app, "btn_start")
        _press(app, "btn_recall")

        pattern = _controller(app).pattern
        wrong = next(i for i in range(96) if i not in pattern)
        _press(app, f"tile_{wrong}")

        assert _status(app) == "FAILED"
        assert len(app.error) == 1
        assert _controller(app).context.round.wrong_cell == wrong

    def test_peek_counts_and_clears_progress(self, app: AppTest) -> None:
        _press(app, "btn_start")
        _press(app, "btn_recall")
        pattern = _controller(app).pattern
        _press(app, f"tile_{pattern.cells[0]}")
        assert _controller(app).progress_label == f"1 / {PATH_LENGTH}"

        _press(app, "btn_peek")

        assert _status(app) == "MEMORIZE"
        assert _controller(app).peek_count == 1
        assert _controller(app).progress_label == f"0 / {PATH_LENGTH}"

    def test_reset_mid_round(self, app: AppTest) -> None:
        _press(app, "btn_start")
        _press(app, "btn_reset")
        assert _status(app) == "READY"
        assert _controller(app).elapsed_label == "00:00"
