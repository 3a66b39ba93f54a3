"""Static file server with a health-check endpoint."""

__version__ = "0.1.0"
