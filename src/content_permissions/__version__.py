"""Version information for content-permissions."""

__version__ = "1.0.0"
