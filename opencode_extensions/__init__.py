"""Command loader and auto-update hook extensions for opencode."""

__version__ = "0.3.0"
