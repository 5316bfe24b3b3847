"""ghzero — a small GitHub command-line front-end."""

__version__ = "1.0.0"
