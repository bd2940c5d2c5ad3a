"""ghdist: language and activity distributions for GitHub users."""

__version__ = "0.1.0"
