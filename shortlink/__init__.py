"""URL shortening with Base62 codes: configuration, SQL storage and application logic."""

__version__ = "1.0.0"