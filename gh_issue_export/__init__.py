"""Export GitHub issues and their discussions to a plain text report."""

__version__ = "0.1.0"
