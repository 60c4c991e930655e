"""Terminal helpers, an editor project-file writer and worked lesson solutions."""

__version__ = "5.5.1"