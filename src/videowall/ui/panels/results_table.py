"""Results table panel.

Shows the four candidate walls side by side, flags the nearest size,
and lets the user pick one with a radio button and confirm it.
"""

from PySide6.QtCore import Qt
from PySide6.QtGui import QBrush, QColor
from PySide6.QtWidgets import (
    QAbstractItemView,
    QButtonGroup,
    QHBoxLayout,
    QHeaderView,
    QLabel,
    QPushButton,
    QRadioButton,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from videowall.config.manager import ConfigManager
from videowall.core.session import WallSession
from videowall.core.solver import Config, Param
from videowall.core.state import AppState, Cancel, Confirm, OpenModal, SelectOption
from videowall.ui.formatting import bound_label, format_aspect_ratio, format_dimension


# (label, locked parameter the row corresponds to, value getter)
_DIMENSION_ROWS = [
    ("Width", Param.WIDTH, lambda c: c.width_mm),
    ("Height", Param.HEIGHT, lambda c: c.height_mm),
    ("Diagonal", Param.DIAGONAL, lambda c: c.diagonal_mm),
    ("Aspect Ratio", Param.ASPECT_RATIO, lambda c: c.aspect_ratio),
]


class ResultsTablePanel(QWidget):
    """Side-by-side comparison of candidate configurations."""

    def __init__(self, config: ConfigManager, session: WallSession, parent=None):
        super().__init__(parent)
        self._config = config
        self._session = session

        layout = QVBoxLayout(self)

        header = QHBoxLayout()
        header.addWidget(
            QLabel("The following size options are the closest configurations to your input parameters."),
            1,
        )
        help_btn = QPushButton("Help me choose")
        help_btn.clicked.connect(lambda: self._session.dispatch(OpenModal("help")))
        header.addWidget(help_btn)
        layout.addLayout(header)

        self._table = QTableWidget()
        self._table.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self._table.setSelectionMode(QAbstractItemView.SelectionMode.NoSelection)
        self._table.horizontalHeader().setSectionResizeMode(QHeaderView.ResizeMode.Stretch)
        layout.addWidget(self._table)

        self._radio_group = QButtonGroup(self)
        self._radio_group.idClicked.connect(lambda i: self._session.dispatch(SelectOption(i)))

        buttons = QHBoxLayout()
        buttons.addStretch()
        cancel_btn = QPushButton("Cancel")
        cancel_btn.clicked.connect(lambda: self._session.dispatch(Cancel()))
        buttons.addWidget(cancel_btn)
        self._confirm_btn = QPushButton("Confirm")
        self._confirm_btn.clicked.connect(lambda: self._session.dispatch(Confirm()))
        buttons.addWidget(self._confirm_btn)
        layout.addLayout(buttons)

        self.refresh(session.state)

    def _format_value(self, state: AppState, param: Param, value: float) -> str:
        if param is Param.ASPECT_RATIO:
            return format_aspect_ratio(value)
        places = self._config.get("display", "decimal_places", 2)
        return format_dimension(value, state.unit, places)

    def _column_header(self, state: AppState, index: int, config: Config) -> str:
        lines = []
        if index == state.nearest_index:
            lines.append("Nearest Size")
        lines.append(f"{config.cols}x{config.rows}")
        lines.append(f"{config.cabinet_type.value} Cabinet - {bound_label(index)}")
        return "\n".join(lines)

    def refresh(self, state: AppState):
        """Rebuild the table from `state`."""
        results = state.results
        self.setVisible(results is not None)
        if results is None:
            return

        accent = QColor(self._config.get("display", "accent_color", "#5B9A8B"))
        rows: list[tuple[str, list[str], bool]] = []
        for label, param, getter in _DIMENSION_ROWS:
            unit_suffix = "" if param is Param.ASPECT_RATIO else f" ({state.unit.short_label})"
            rows.append(
                (label + unit_suffix, [self._format_value(state, param, getter(c)) for c in results], False)
            )
            if state.locks[param]:
                entry = self._format_value(state, param, state.values[param])
                rows.append(("Entry", [entry] * len(results), True))

        self._table.clear()
        self._table.setColumnCount(len(results))
        self._table.setRowCount(len(rows) + 1)
        self._table.setHorizontalHeaderLabels(
            [self._column_header(state, i, c) for i, c in enumerate(results)]
        )
        self._table.setVerticalHeaderLabels([r[0] for r in rows] + ["Select"])

        for row, (_, values, is_entry) in enumerate(rows):
            for col, text in enumerate(values):
                item = QTableWidgetItem(text)
                item.setTextAlignment(Qt.AlignmentFlag.AlignCenter)
                if is_entry:
                    item.setForeground(QBrush(QColor("#6b7280")))
                if col == state.nearest_index:
                    item.setBackground(QBrush(QColor(accent.red(), accent.green(), accent.blue(), 40)))
                self._table.setItem(row, col, item)

        for button in self._radio_group.buttons():
            self._radio_group.removeButton(button)
        for col in range(len(results)):
            radio = QRadioButton()
            radio.setChecked(state.selected_index == col)
            self._radio_group.addButton(radio, col)
            cell = QWidget()
            cell_layout = QHBoxLayout(cell)
            cell_layout.setContentsMargins(0, 0, 0, 0)
            cell_layout.setAlignment(Qt.AlignmentFlag.AlignCenter)
            cell_layout.addWidget(radio)
            self._table.setCellWidget(len(rows), col, cell)

        self._table.resizeRowsToContents()
        self._confirm_btn.setEnabled(state.selected_index is not None)
