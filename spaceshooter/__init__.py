"""A terminal arcade space shooter with player accounts and high scores."""

__version__ = "1.0.0"