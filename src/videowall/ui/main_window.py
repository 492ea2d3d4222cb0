"""Main application window for VideoWall Sizer.

Stacks the parameter form, results table, wall preview and history in a
single scrollable column. Every panel renders from the session state and
is refreshed after each dispatched action.
"""

from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QScrollArea,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from videowall.version import __version_display__
from videowall.config.manager import ConfigManager
from videowall.core.session import WallSession
from videowall.core.state import AppState, CloseModal, OpenModal
from videowall.ui.panels.history import HistoryPanel
from videowall.ui.panels.parameter_form import ParameterFormPanel
from videowall.ui.panels.results_table import ResultsTablePanel
from videowall.ui.panels.wall_grid import WallGridWidget


class VideoWallMainWindow(QMainWindow):
    """Primary application window."""

    def __init__(self, config: ConfigManager, session: WallSession):
        super().__init__()
        self._config = config
        self._session = session
        self._last_confirmed = session.state.confirmed

        self.setWindowTitle(__version_display__)
        self.setMinimumSize(960, 760)

        self._build_menu_bar()
        self._build_status_bar()
        self._build_panels()

        session.add_listener(self._on_state_changed)
        self._refresh(session.state)

    def _build_menu_bar(self):
        menu_bar = self.menuBar()

        file_menu = menu_bar.addMenu("&File")
        file_menu.addAction(self._action("E&xit", "Alt+F4", self.close))

        edit_menu = menu_bar.addMenu("&Edit")
        edit_menu.addAction(self._action("&Preferences...", "Ctrl+,", self._open_preferences))

        help_menu = menu_bar.addMenu("&Help")
        help_menu.addAction(self._action("Help me &choose...", callback=lambda: self._session.dispatch(OpenModal("help"))))
        help_menu.addSeparator()
        help_menu.addAction(self._action("&About VideoWall Sizer", callback=self._show_about))

    def _build_status_bar(self):
        status = QStatusBar()
        self.setStatusBar(status)
        self._data_label = QLabel(f"Data: {self._config.data_dir()}")
        status.addPermanentWidget(self._data_label)

    def _build_panels(self):
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        container = QWidget()
        layout = QVBoxLayout(container)

        self._form = ParameterFormPanel(self._config, self._session)
        layout.addWidget(self._form)

        self._results = ResultsTablePanel(self._config, self._session)
        layout.addWidget(self._results)

        self._wall = WallGridWidget(self._config)
        layout.addWidget(self._wall)

        quote_row = QHBoxLayout()
        quote_row.addStretch()
        self._quote_btn = QPushButton("Request a Quote")
        self._quote_btn.clicked.connect(lambda: self._session.dispatch(OpenModal("quote")))
        quote_row.addWidget(self._quote_btn)
        layout.addLayout(quote_row)

        self._history = HistoryPanel(self._config, self._session)
        layout.addWidget(self._history)
        layout.addStretch()

        scroll.setWidget(container)
        self.setCentralWidget(scroll)

    def _action(self, text: str, shortcut: str = None, callback=None) -> QAction:
        action = QAction(text, self)
        if shortcut:
            action.setShortcut(QKeySequence(shortcut))
        if callback:
            action.triggered.connect(callback)
        return action

    # -------------------------------------------------------------------
    # State sync
    # -------------------------------------------------------------------

    def _toast(self, message: str):
        seconds = self._config.get("general", "confirm_toast_seconds", 3)
        self.statusBar().showMessage(message, int(seconds * 1000))

    def _on_state_changed(self, state: AppState):
        if state.confirmed is not None and state.confirmed is not self._last_confirmed:
            wall = state.confirmed
            self._toast(f"Saved {wall.cols}x{wall.rows} {wall.cabinet_type.value} configuration")
        self._last_confirmed = state.confirmed
        self._refresh(state)

        if state.modal_open:
            self._open_contact_dialog(state.modal_source)

    def _refresh(self, state: AppState):
        self._form.refresh(state)
        self._results.refresh(state)
        self._wall.set_wall(state.confirmed, state.unit)
        self._quote_btn.setVisible(state.confirmed is not None)
        self._history.refresh(state)

    def _open_contact_dialog(self, source: str | None):
        from videowall.ui.widgets.contact_dialog import ContactDialog

        dialog = ContactDialog(self._session, source, self)
        accepted = dialog.exec()
        self._session.dispatch(CloseModal())
        if accepted and dialog.quote is not None:
            self._toast("Thanks! We'll be in touch shortly.")

    # -------------------------------------------------------------------
    # Menu actions
    # -------------------------------------------------------------------

    def _open_preferences(self):
        from videowall.ui.panels.config_editor import ConfigEditorDialog

        dialog = ConfigEditorDialog(self._config, self)
        dialog.exec()
        self._refresh(self._session.state)

    def _show_about(self):
        QMessageBox.about(
            self,
            "About VideoWall Sizer",
            f"<h2>{__version_display__}</h2>"
            "<p>Sizes a modular video wall from two constraints and two "
            "cabinet formats (16:9 at 600 x 337.5 mm, 1:1 at 500 x 500 mm).</p>"
            "<p>Selections and quote requests are stored locally.</p>",
        )

    def closeEvent(self, event):
        self._config.save()
        event.accept()
