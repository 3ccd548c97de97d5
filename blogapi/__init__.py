"""Read-only markdown blog content API."""

__version__ = "0.1.0"
