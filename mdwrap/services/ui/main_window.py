from __future__ import annotations

from pathlib import Path

from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import (
    QApplication,
    QMainWindow,
    QMessageBox,
    QPlainTextEdit,
    QStatusBar,
    QToolBar,
)

from mdwrap.domain.interfaces import IAppConfig
from mdwrap.domain.models import DelimiterPair
from mdwrap.services.ui.adapters.qt_text_buffer import QtTextBufferAdapter
from mdwrap.services.ui.commands import ToggleWrap
from mdwrap.utils.constants import (
    ADD_NEXT_OCCURRENCE_SHORTCUT,
    CLEAR_CURSORS_SHORTCUT,
    DEFAULT_FORMAT_LABELS,
)


class MainWindow(QMainWindow):
    """Thin PyQt window: a plain-text editor plus one toggle action per configured format."""

    def __init__(
        self,
        config: IAppConfig,
        *,
        start_path: Path | None = None,
        app_title: str = "mdwrap",
    ) -> None:
        super().__init__()
        self.setWindowTitle(app_title)
        self.resize(900, 650)

        self.config = config

        # Widgets
        self.editor = QPlainTextEdit(self)
        self.editor.setTabStopDistance(4 * self.editor.fontMetrics().horizontalAdvance(" "))
        self.setCentralWidget(self.editor)

        self.buffer = QtTextBufferAdapter(self.editor)

        # UI
        self._build_actions()
        self._build_toolbar()
        self._build_menu()
        self.setStatusBar(QStatusBar(self))

        self.editor.cursorPositionChanged.connect(self._update_status)

        if start_path:
            self._load_path(start_path)

    # ---------- UI creation ----------
    def _build_actions(self):
        self.exit_action = QAction("&Exit", self)
        self.exit_action.setShortcut("Ctrl+Q")
        self.exit_action.triggered.connect(QApplication.instance().quit)

        self.act_undo = QAction(
            "Undo", self, shortcut=QKeySequence.StandardKey.Undo, triggered=self.editor.undo
        )
        self.act_redo = QAction(
            "Redo", self, shortcut=QKeySequence.StandardKey.Redo, triggered=self.editor.redo
        )

        # One toggle per format; config decides the delimiters and shortcuts
        self.format_actions: dict[str, QAction] = {}
        for name, pair in self.config.delimiter_pairs().items():
            act = QAction(
                DEFAULT_FORMAT_LABELS.get(name, name),
                self,
                triggered=lambda chk=False, p=pair: self.toggle_format(p),
            )
            act.setToolTip(f"Toggle {name} ({pair.left}…{pair.right})")
            shortcut = self.config.shortcut(name)
            if shortcut:
                act.setShortcut(shortcut)
            self.format_actions[name] = act

        self.act_next_occurrence = QAction(
            "Add Next Occurrence",
            self,
            shortcut=ADD_NEXT_OCCURRENCE_SHORTCUT,
            triggered=self._add_next_occurrence,
        )
        self.act_clear_cursors = QAction(
            "Clear Extra Cursors",
            self,
            shortcut=CLEAR_CURSORS_SHORTCUT,
            triggered=self._clear_cursors,
        )

    def _build_toolbar(self):
        tbf = QToolBar("Formatting", self)
        tbf.setMovable(False)
        for a in self.format_actions.values():
            tbf.addAction(a)
        tbf.addSeparator()
        tbf.addAction(self.act_next_occurrence)
        self.addToolBar(tbf)

    def _build_menu(self):
        m = self.menuBar()
        filem = m.addMenu("&File")
        filem.addAction(self.exit_action)

        editm = m.addMenu("&Edit")
        editm.addAction(self.act_undo)
        editm.addAction(self.act_redo)
        editm.addSeparator()
        for a in self.format_actions.values():
            editm.addAction(a)
        editm.addSeparator()
        editm.addAction(self.act_next_occurrence)
        editm.addAction(self.act_clear_cursors)

    # ---------- Actions ----------
    def toggle_format(self, pair: DelimiterPair) -> None:
        ToggleWrap(self.buffer, pair).execute()
        self._update_status()

    def _add_next_occurrence(self) -> None:
        if not self.buffer.select_next_occurrence():
            self.statusBar().showMessage("No further occurrence", 2000)
        self._update_status()

    def _clear_cursors(self) -> None:
        self.buffer.clear_secondary()
        self._update_status()

    def _load_path(self, path: Path) -> None:
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            QMessageBox.critical(self, "Open Error", f"Failed to open file:\n{e}")
            return
        self.editor.setPlainText(text)
        self.setWindowTitle(f"{path.name} — {self.windowTitle()}")

    # ---------- Helpers ----------
    def _update_status(self) -> None:
        count = 1 + self.buffer.secondary_count
        pos = self.buffer.get_selections()[0].end
        label = f"Ln {pos.line}, Col {pos.column}"
        if count > 1:
            label += f"  ({count} selections)"
        self.statusBar().showMessage(label)
