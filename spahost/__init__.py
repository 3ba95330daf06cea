"""Static asset host with single-page-application fallback."""

__version__ = "1.0.0"
