"""Weather Service API - normalized weather summaries by coordinates."""

__version__ = "1.0.0"
