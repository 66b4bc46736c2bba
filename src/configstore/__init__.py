"""configstore - observable config store with theme and language updates."""

__version__ = "1.0.0"
