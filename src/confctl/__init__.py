"""confctl — configuration management control CLI."""

__version__ = "0.1.0"
