"""VideoWall Sizer application entry point."""

import sys


def main():
    """Launch the VideoWall Sizer application."""
    from PySide6.QtWidgets import QApplication

    from videowall.config.manager import ConfigManager
    from videowall.core.logging import setup_logging
    from videowall.core.session import WallSession
    from videowall.core.storage import HistoryStore, QuoteStore
    from videowall.ui.main_window import VideoWallMainWindow

    app = QApplication(sys.argv)
    app.setApplicationName("VideoWall Sizer")
    app.setOrganizationName("VideoWall")

    config = ConfigManager()
    config.load()
    setup_logging(config)

    data_dir = config.data_dir()
    session = WallSession(
        HistoryStore(data_dir),
        QuoteStore(data_dir),
        unit=config.default_unit(),
    )

    window = VideoWallMainWindow(config, session)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
