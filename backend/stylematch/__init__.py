"""StyleMatch: architectural photo analysis and AI style transformation."""

__version__ = "1.0.0"
