"""History panel: previously confirmed walls, newest first."""

from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from videowall.config.manager import ConfigManager
from videowall.core.records import SavedSelection, now_ms
from videowall.core.session import WallSession
from videowall.core.state import AppState, ReloadHistory
from videowall.ui.formatting import format_dimension, format_time_ago


class HistoryPanel(QWidget):
    """List of saved selections with reload and delete buttons."""

    def __init__(self, config: ConfigManager, session: WallSession, parent=None):
        super().__init__(parent)
        self._config = config
        self._session = session

        layout = QVBoxLayout(self)
        title = QLabel("History")
        title.setStyleSheet("font-weight: bold;")
        layout.addWidget(title)

        self._rows = QVBoxLayout()
        layout.addLayout(self._rows)
        layout.addStretch()

        self.refresh(session.state)

    def _clear_rows(self):
        while self._rows.count():
            item = self._rows.takeAt(0)
            if item.widget() is not None:
                item.widget().deleteLater()

    def _build_row(self, state: AppState, selection: SavedSelection, now: int) -> QWidget:
        unit = state.unit
        w = format_dimension(selection.width_mm, unit, 1)
        h = format_dimension(selection.height_mm, unit, 1)

        row = QWidget()
        row_layout = QHBoxLayout(row)
        row_layout.setContentsMargins(0, 0, 0, 0)

        load_btn = QPushButton(
            f"{selection.cols}x{selection.rows} {selection.cabinet_type.value}"
            f"  |  {w}x{h} {unit.short_label}"
        )
        load_btn.setFlat(True)
        load_btn.setToolTip(f"Load {selection.cols}x{selection.rows} {selection.cabinet_type.value} configuration")
        load_btn.clicked.connect(lambda checked=False, s=selection: self._session.dispatch(ReloadHistory(s)))
        row_layout.addWidget(load_btn, 1)

        row_layout.addWidget(QLabel(format_time_ago(selection.saved_at, now)))

        delete_btn = QPushButton("Delete")
        delete_btn.setToolTip("Delete selection")
        delete_btn.clicked.connect(lambda checked=False, sid=selection.id: self._session.delete_history(sid))
        row_layout.addWidget(delete_btn)
        return row

    def refresh(self, state: AppState):
        self._clear_rows()
        self.setVisible(bool(state.history))
        now = now_ms()
        for selection in state.history:
            self._rows.addWidget(self._build_row(state, selection, now))
