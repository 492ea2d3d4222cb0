"""Wall preview for the confirmed configuration.

Draws the cabinet grid in true cabinet proportions with width, height
and diagonal annotations. Very large grids are capped at a configurable
number of drawn cells per axis.
"""

import math

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QColor, QFont, QPainter, QPen
from PySide6.QtWidgets import QSizePolicy, QWidget

from videowall.config.manager import ConfigManager
from videowall.core.catalog import CABINETS
from videowall.core.solver import Config
from videowall.core.units import Unit
from videowall.ui.formatting import format_dimension


_PADDING = 60
_CELL_BORDER = QColor("#9ca3af")
_CELL_FILL = QColor("#f3f4f6")
_TEXT_COLOR = QColor("#374151")


class WallGridWidget(QWidget):
    """Scaled drawing of a rows x cols cabinet wall."""

    def __init__(self, config: ConfigManager, parent=None):
        super().__init__(parent)
        self._config = config
        self._wall: Config | None = None
        self._unit = Unit.INCHES
        self.setMinimumHeight(320)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)

    def set_wall(self, wall: Config | None, unit: Unit):
        self._wall = wall
        self._unit = unit
        self.setVisible(wall is not None)
        self.update()

    def paintEvent(self, event):
        if self._wall is None:
            return

        wall = self._wall
        max_cells = self._config.get("display", "grid_max_cells", 50)
        places = self._config.get("display", "decimal_places", 2)
        accent = QColor(self._config.get("display", "accent_color", "#5B9A8B"))

        cols = min(wall.cols, max_cells)
        rows = min(wall.rows, max_cells)
        cab = CABINETS[wall.cabinet_type]

        # Fit the drawn grid into the widget, keeping cabinet proportions
        avail_w = max(self.width() - 2 * _PADDING, 1)
        avail_h = max(self.height() - 2 * _PADDING, 1)
        scale = min(avail_w / (cols * cab.width), avail_h / (rows * cab.height))
        cell_w = cab.width * scale
        cell_h = cab.height * scale
        grid_w = cols * cell_w
        grid_h = rows * cell_h
        left = (self.width() - grid_w) / 2
        top = (self.height() - grid_h) / 2

        p = QPainter(self)
        p.setRenderHint(QPainter.RenderHint.Antialiasing)

        p.setPen(QPen(_CELL_BORDER, 1))
        p.setBrush(_CELL_FILL)
        for r in range(rows):
            for c in range(cols):
                p.drawRect(QRectF(left + c * cell_w, top + r * cell_h, cell_w, cell_h))

        p.setFont(QFont("Segoe UI", 9))
        line_pen = QPen(accent, 1.5)

        # Width annotation above the grid
        p.setPen(line_pen)
        y = top - 20
        p.drawLine(QPointF(left, y), QPointF(left + grid_w, y))
        p.setPen(_TEXT_COLOR)
        p.drawText(
            QRectF(left, y - 20, grid_w, 16),
            Qt.AlignmentFlag.AlignCenter,
            f"{format_dimension(wall.width_mm, self._unit, places)} {self._unit.short_label}",
        )

        # Height annotation left of the grid
        p.setPen(line_pen)
        x = left - 20
        p.drawLine(QPointF(x, top), QPointF(x, top + grid_h))
        p.save()
        p.translate(x - 6, top + grid_h / 2)
        p.rotate(-90)
        p.setPen(_TEXT_COLOR)
        p.drawText(
            QRectF(-grid_h / 2, -16, grid_h, 16),
            Qt.AlignmentFlag.AlignCenter,
            f"{format_dimension(wall.height_mm, self._unit, places)} {self._unit.short_label}",
        )
        p.restore()

        # Diagonal from bottom-left to top-right
        p.setPen(QPen(accent, 1.5, Qt.PenStyle.DashLine))
        p.drawLine(QPointF(left, top + grid_h), QPointF(left + grid_w, top))
        p.save()
        p.translate(left + grid_w / 2, top + grid_h / 2)
        p.rotate(-math.degrees(math.atan2(grid_h, grid_w)))
        p.setPen(_TEXT_COLOR)
        p.drawText(
            QRectF(-grid_w / 2, -20, grid_w, 16),
            Qt.AlignmentFlag.AlignCenter,
            f"{format_dimension(wall.diagonal_mm, self._unit, places)} {self._unit.short_label}",
        )
        p.restore()

        caption = f"{wall.cols} x {wall.rows} {wall.cabinet_type.value} cabinets ({wall.total_cabinets} total)"
        if wall.rows > max_cells or wall.cols > max_cells:
            caption += f", showing {cols} x {rows}"
        p.drawText(
            QRectF(0, self.height() - 24, self.width(), 20),
            Qt.AlignmentFlag.AlignCenter,
            caption,
        )

        p.end()
