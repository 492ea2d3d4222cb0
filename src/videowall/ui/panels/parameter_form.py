"""Parameter form panel.

One row per wall parameter with an input, an Apply button and a
lock toggle. Once two parameters are locked the remaining rows are
disabled until one is unlocked.
"""

from PySide6.QtWidgets import (
    QComboBox,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from videowall.config.manager import ConfigManager
from videowall.core.catalog import ASPECT_RATIOS, find_preset
from videowall.core.session import WallSession
from videowall.core.solver import Param
from videowall.core.state import AppState, LockParam, SetUnit, UnlockParam
from videowall.core.units import Unit, from_mm, to_mm
from videowall.ui.formatting import info_message


# Display order of the rows
_ROWS = [Param.DIAGONAL, Param.ASPECT_RATIO, Param.WIDTH, Param.HEIGHT]


class ParameterFormPanel(QWidget):
    """Inputs for the four wall parameters."""

    def __init__(self, config: ConfigManager, session: WallSession, parent=None):
        super().__init__(parent)
        self._config = config
        self._session = session
        self._inputs: dict[Param, QWidget] = {}
        self._labels: dict[Param, QLabel] = {}
        self._apply_buttons: dict[Param, QPushButton] = {}
        self._lock_buttons: dict[Param, QPushButton] = {}

        layout = QVBoxLayout(self)

        title = QLabel("Enter at least 2 parameters.")
        title.setStyleSheet("font-size: 14pt; font-weight: bold;")
        layout.addWidget(title)

        # Info banner + unit selector
        header = QHBoxLayout()
        self._info_label = QLabel()
        header.addWidget(self._info_label, 1)
        self._unit_combo = QComboBox()
        for unit in Unit:
            self._unit_combo.addItem(unit.label, unit)
        self._unit_combo.currentIndexChanged.connect(self._on_unit_changed)
        header.addWidget(self._unit_combo)
        layout.addLayout(header)

        grid = QGridLayout()
        for row, param in enumerate(_ROWS):
            label = QLabel()
            self._labels[param] = label
            grid.addWidget(label, row, 0)

            if param is Param.ASPECT_RATIO:
                widget = QComboBox()
                widget.addItem("Aspect Ratio", None)
                for preset in ASPECT_RATIOS:
                    widget.addItem(preset.label, preset.value)
                grid.addWidget(widget, row, 1, 1, 2)
            else:
                widget = QLineEdit()
                widget.setPlaceholderText("0.00")
                widget.returnPressed.connect(lambda p=param: self._apply(p))
                grid.addWidget(widget, row, 1)

                apply_btn = QPushButton("Apply")
                apply_btn.clicked.connect(lambda checked=False, p=param: self._apply(p))
                self._apply_buttons[param] = apply_btn
                grid.addWidget(apply_btn, row, 2)
            self._inputs[param] = widget

            lock_btn = QPushButton()
            lock_btn.setFixedWidth(80)
            lock_btn.clicked.connect(lambda checked=False, p=param: self._toggle_lock(p))
            self._lock_buttons[param] = lock_btn
            grid.addWidget(lock_btn, row, 3)
        layout.addLayout(grid)

        self._error_label = QLabel()
        self._error_label.setStyleSheet("color: #c0392b;")
        self._error_label.setWordWrap(True)
        layout.addWidget(self._error_label)

        hint = QLabel(
            "When you enter your values, this tool designs the video wall that "
            "fits your dimensions. Lock 2 parameters and the tool fits a wall "
            "to your specifications."
        )
        hint.setWordWrap(True)
        hint.setStyleSheet("color: #6b7280;")
        layout.addWidget(hint)
        layout.addStretch()

        self.refresh(session.state)

    # -------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------

    def _apply(self, param: Param):
        """Lock a dimension from the typed value, in the current unit."""
        widget = self._inputs[param]
        try:
            value = float(widget.text().strip())
        except ValueError:
            return
        if value <= 0:
            return
        state = self._session.state
        self._session.dispatch(LockParam(param, to_mm(value, state.unit)))

    def _toggle_lock(self, param: Param):
        state = self._session.state
        if state.locks[param]:
            self._session.dispatch(UnlockParam(param))
        elif param is Param.ASPECT_RATIO:
            value = self._inputs[param].currentData()
            if value:
                self._session.dispatch(LockParam(param, float(value)))
        else:
            self._apply(param)

    def _on_unit_changed(self, index: int):
        unit = self._unit_combo.itemData(index)
        if unit is not None and unit != self._session.state.unit:
            self._session.dispatch(SetUnit(unit))

    # -------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------

    def _display_value(self, state: AppState, param: Param) -> str:
        places = self._config.get("display", "decimal_places", 2)
        value = state.values[param]
        if param is Param.ASPECT_RATIO:
            preset = find_preset(value, tolerance=0.001)
            return preset.label if preset else f"{value:.2f}"
        return f"{from_mm(value, state.unit):.{places}f}"

    def refresh(self, state: AppState):
        """Sync all widgets with `state`."""
        self._info_label.setText(info_message(state.lock_count))

        self._unit_combo.blockSignals(True)
        self._unit_combo.setCurrentIndex(self._unit_combo.findData(state.unit))
        self._unit_combo.blockSignals(False)

        for param in _ROWS:
            locked = state.locks[param]
            disabled = not locked and state.lock_count >= 2
            widget = self._inputs[param]

            if param is Param.ASPECT_RATIO:
                self._labels[param].setText(param.label)
                if locked:
                    preset = find_preset(state.values[param], tolerance=0.001)
                    idx = widget.findText(preset.label) if preset else -1
                    if idx >= 0:
                        widget.setCurrentIndex(idx)
            else:
                self._labels[param].setText(f"{param.label} ({state.unit.label})")
                if locked:
                    widget.setText(self._display_value(state, param))
                self._apply_buttons[param].setEnabled(not (disabled or locked))

            widget.setEnabled(not (disabled or locked))
            lock_btn = self._lock_buttons[param]
            lock_btn.setText("Unlock" if locked else "Lock")
            lock_btn.setEnabled(locked or not disabled)

        self._error_label.setText(state.error or "")
        self._error_label.setVisible(state.error is not None)
