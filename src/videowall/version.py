"""Version information for VideoWall Sizer."""

__version__ = "1.0.0"
__version_display__ = f"VideoWall Sizer V{__version__}"
