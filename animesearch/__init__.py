"""Search the Jikan anime API and render results as plain text."""

__version__ = "0.1.0"
