"""Headlines - a terminal news reader for the GNews API."""

__version__ = "0.1.0"
