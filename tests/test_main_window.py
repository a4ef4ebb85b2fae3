from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

import pytest

from mdwrap.domain.models import DelimiterPair, Selection
from mdwrap.services.ui.main_window import MainWindow
from mdwrap.utils.constants import DEFAULT_SHORTCUTS

# ------------------------------
# Fakes & helpers
# ------------------------------


class FakeConfig:
    """Only what MainWindow reads from the app config."""

    def __init__(self, extra: Mapping[str, DelimiterPair] | None = None) -> None:
        self._pairs = {
            "bold": DelimiterPair.of("**"),
            "italic": DelimiterPair.of("*"),
            **(extra or {}),
        }

    def delimiter_pairs(self) -> Mapping[str, DelimiterPair]:
        return dict(self._pairs)

    def shortcut(self, name: str) -> str | None:
        return DEFAULT_SHORTCUTS.get(name)


@pytest.fixture()
def window(qapp, qtbot) -> MainWindow:
    w = MainWindow(FakeConfig({"underline": DelimiterPair.of("<u>", "</u>")}), app_title="Test")
    qtbot.addWidget(w)
    return w


# ------------------------------
# Tests
# ------------------------------


def test_one_action_per_configured_format(window: MainWindow):
    assert list(window.format_actions) == ["bold", "italic", "underline"]
    assert window.format_actions["bold"].shortcut().toString() == "Ctrl+B"
    assert window.format_actions["underline"].shortcut().isEmpty()


def test_triggering_format_action_toggles_selection(window: MainWindow):
    window.editor.setPlainText("make this bold")
    window.buffer.set_selections([Selection.of(1, 11, 1, 15)])

    window.format_actions["bold"].trigger()
    assert window.editor.toPlainText() == "make this **bold**"

    window.format_actions["bold"].trigger()
    assert window.editor.toPlainText() == "make this bold"


def test_asymmetric_format_from_config(window: MainWindow):
    window.editor.setPlainText("x")
    window.buffer.set_selections([Selection.of(1, 1, 1, 2)])
    window.format_actions["underline"].trigger()
    assert window.editor.toPlainText() == "<u>x</u>"


def test_next_occurrence_and_clear_actions(window: MainWindow):
    window.editor.setPlainText("a b a")
    window.buffer.set_selections([Selection.of(1, 1, 1, 2)])

    window.act_next_occurrence.trigger()
    assert window.buffer.secondary_count == 1
    assert "2 selections" in window.statusBar().currentMessage()

    window.toggle_format(DelimiterPair.of("*"))
    assert window.editor.toPlainText() == "*a* b *a*"

    window.act_clear_cursors.trigger()
    assert window.buffer.secondary_count == 0


def test_start_path_preloads_text(qapp, qtbot, tmp_path: Path):
    src = tmp_path / "notes.md"
    src.write_text("# Notes\n", encoding="utf-8")
    w = MainWindow(FakeConfig(), start_path=src, app_title="Test")
    qtbot.addWidget(w)
    assert w.editor.toPlainText() == "# Notes\n"
    assert w.windowTitle().startswith("notes.md")


def test_unreadable_start_path_shows_error(monkeypatch, qapp, qtbot, tmp_path: Path):
    calls = []
    monkeypatch.setattr(
        "mdwrap.services.ui.main_window.QMessageBox.critical",
        lambda *a, **k: calls.append(a),
    )
    w = MainWindow(FakeConfig(), start_path=tmp_path / "missing.md", app_title="Test")
    qtbot.addWidget(w)
    assert calls and calls[0][1] == "Open Error"
    assert w.editor.toPlainText() == ""
