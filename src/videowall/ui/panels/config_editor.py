"""Preferences dialog for VideoWall Sizer.

Presents a tabbed interface with one tab per configuration group.
Input widgets are chosen from each value's type.
"""

from typing import Any

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QDialog,
    QDialogButtonBox,
    QFileDialog,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QScrollArea,
    QSpinBox,
    QTabWidget,
    QVBoxLayout,
    QWidget,
)

from videowall.config.manager import ConfigManager
from videowall.core.units import Unit


# Keys that hold directory paths and get a browse button
_PATH_KEYS = {"data_directory"}

# Keys with known options shown as combo boxes: (stored value, display text)
_ENUM_OPTIONS = {
    "default_unit": [(u.value, u.label) for u in Unit],
    "log_level": [(lvl, lvl) for lvl in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")],
}


class ConfigEditorDialog(QDialog):
    """Tabbed preferences editor."""

    def __init__(self, config: ConfigManager, parent=None):
        super().__init__(parent)
        self._config = config
        self._widgets: dict[tuple[str, str], QWidget] = {}

        self.setWindowTitle("VideoWall Sizer Preferences")
        self.setMinimumSize(560, 400)

        layout = QVBoxLayout(self)

        self._tabs = QTabWidget()
        for group in config.groups():
            self._tabs.addTab(self._build_group_tab(group), config.get_group_label(group))
        layout.addWidget(self._tabs)

        self._status_label = QLabel("")
        layout.addWidget(self._status_label)

        buttons = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok
            | QDialogButtonBox.StandardButton.Cancel
            | QDialogButtonBox.StandardButton.Apply
        )
        buttons.accepted.connect(self._apply_and_close)
        buttons.rejected.connect(self.reject)
        buttons.button(QDialogButtonBox.StandardButton.Apply).clicked.connect(self._apply)
        layout.addWidget(buttons)

    def _build_group_tab(self, group: str) -> QWidget:
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)

        container = QWidget()
        form = QFormLayout(container)
        form.setLabelAlignment(Qt.AlignmentFlag.AlignRight)

        for key, value in self._config.get_group(group).items():
            widget = self._create_widget_for_value(key, value)
            form.addRow(key.replace("_", " ").title() + ":", widget)
            if key in _PATH_KEYS:
                self._widgets[(group, key)] = widget.findChild(QLineEdit)
            else:
                self._widgets[(group, key)] = widget

        scroll.setWidget(container)
        return scroll

    def _create_widget_for_value(self, key: str, value: Any) -> QWidget:
        if isinstance(value, bool):
            widget = QCheckBox()
            widget.setChecked(value)
            return widget

        if isinstance(value, int):
            widget = QSpinBox()
            widget.setRange(0, 999999)
            widget.setValue(value)
            return widget

        if key in _ENUM_OPTIONS:
            widget = QComboBox()
            for option, text in _ENUM_OPTIONS[key]:
                widget.addItem(text, option)
            idx = widget.findData(value)
            if idx >= 0:
                widget.setCurrentIndex(idx)
            return widget

        if key in _PATH_KEYS:
            container = QWidget()
            row = QHBoxLayout(container)
            row.setContentsMargins(0, 0, 0, 0)
            line_edit = QLineEdit(str(value))
            line_edit.setPlaceholderText("(default)")
            row.addWidget(line_edit)
            browse_btn = QPushButton("Browse...")
            browse_btn.clicked.connect(lambda checked=False, le=line_edit: self._browse_dir(le))
            row.addWidget(browse_btn)
            return container

        return QLineEdit(str(value))

    def _browse_dir(self, line_edit: QLineEdit):
        path = QFileDialog.getExistingDirectory(self, "Select Directory")
        if path:
            line_edit.setText(path)

    @staticmethod
    def _read_widget_value(widget: QWidget) -> Any:
        if isinstance(widget, QCheckBox):
            return widget.isChecked()
        if isinstance(widget, QSpinBox):
            return widget.value()
        if isinstance(widget, QComboBox):
            return widget.currentData() or widget.currentText()
        if isinstance(widget, QLineEdit):
            return widget.text()
        return None

    def _apply(self):
        for (group, key), widget in self._widgets.items():
            value = self._read_widget_value(widget)
            if value is not None:
                self._config.set(group, key, value)
        self._config.save()
        self._status_label.setText("Preferences saved. Storage and logging changes apply on restart.")

    def _apply_and_close(self):
        self._apply()
        self.accept()
