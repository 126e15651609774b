"""Figma node image CLI."""

__version__ = "1.0.0"
