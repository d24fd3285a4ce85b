"""Dump the photos stored in a Game Boy Camera save RAM image."""
__version__ = "0.1.0"
