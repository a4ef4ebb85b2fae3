from __future__ import annotations

import os
from collections.abc import Callable

import pytest
from PyQt6.QtWidgets import QApplication

from mdwrap.domain.models import Selection
from mdwrap.services.text_buffer import InMemoryTextBuffer

# Headless runs (CI) have no display server
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


# --- Fallback QApplication fixture (works with or without pytest-qt) ---
@pytest.fixture(scope="session")
def qapp():
    """Provide a QApplication for tests that need Qt.
    Creates one if not present; reuses existing otherwise.
    """
    app = QApplication.instance()
    created = False
    if app is None:
        app = QApplication([])
        created = True
    try:
        yield app
    finally:
        # Don't forcibly quit a shared app; only close if we created it here.
        if created:
            app.quit()


# --- Other common fixtures ---


@pytest.fixture()
def make_buffer() -> Callable[..., InMemoryTextBuffer]:
    """make_buffer("text", Selection.of(...), ...) -> buffer with those selections active."""

    def _make(text: str, *selections: Selection) -> InMemoryTextBuffer:
        return InMemoryTextBuffer(text, list(selections) or None)

    return _make
