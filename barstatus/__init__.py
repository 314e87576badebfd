"""Functions that read system figures as short strings for status bars."""

__version__ = "0.1.0"