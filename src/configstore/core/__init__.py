"""Core domain package for configstore.

Core holds the config store, its models and ports without any file, SQLite
or UI-specific code, keeping the state contract portable.
"""
