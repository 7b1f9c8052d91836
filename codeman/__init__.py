"""codeman — find and report code directories in a tree."""

__version__ = "0.1.0"
