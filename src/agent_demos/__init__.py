"""Example applications built on the Claude Agent SDK."""

__version__ = "0.1.0"
