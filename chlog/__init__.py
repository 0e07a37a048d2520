"""Keep a Changelog maintenance tool."""

__version__ = "1.0.0"
