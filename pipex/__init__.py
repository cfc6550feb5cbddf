"""Helpers for ASCII characters, strings, byte buffers, linked lists and descriptor output."""

__version__ = "0.1.0"