"""Render-state types, vector math, colour formats, bitmap images and text/JSON utilities."""

__version__ = "0.1.0"