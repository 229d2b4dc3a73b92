"""Dump the text files under a set of paths into a single tagged document."""

__version__ = "0.1.0"
