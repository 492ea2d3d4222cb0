"""
VideoWall Sizer - modular video-wall sizing tool.

Takes two physical constraints (aspect ratio, width, height or diagonal),
fits a grid of fixed-size display cabinets around them, and lets the user
pick, confirm and keep a history of wall configurations.
"""

from videowall.version import __version__, __version_display__

__all__ = ["__version__", "__version_display__"]
