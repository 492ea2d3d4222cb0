"""Default configuration values for VideoWall Sizer.

Configuration is organized into groups. Each group becomes a tab
in the preferences dialog.
"""

DEFAULT_CONFIG = {
    # --- General ---
    "general": {
        "_label": "General",
        "default_unit": "in",  # mm, m, ft, in
        "confirm_toast_seconds": 3,
    },
    # --- Display ---
    "display": {
        "_label": "Display",
        "decimal_places": 2,
        "grid_max_cells": 50,  # wall preview draws at most this many rows/cols
        "accent_color": "#5B9A8B",
    },
    # --- Storage ---
    "storage": {
        "_label": "Storage",
        "data_directory": "",  # empty = platform user data dir
    },
    # --- Logging ---
    "logging": {
        "_label": "Logging",
        "log_level": "INFO",  # DEBUG, INFO, WARNING, ERROR, CRITICAL
        "log_to_file": True,
        "log_retention_days": 30,
        "log_max_size_mb": 10,
        "log_console_output": True,
    },
}
