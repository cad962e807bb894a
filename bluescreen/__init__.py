"""Blue Screen of App: parody system failure pages and their JSON API."""

__version__ = "1.0.0"
