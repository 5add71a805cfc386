"""Kneeboard — dead-reckoning navigation logs rendered as printable PDF pages."""

__version__ = "0.1.0"
