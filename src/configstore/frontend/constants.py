"""Shared constants for the Textual UI."""

from __future__ import annotations

ACCENT_BLUE = "#2AABEE"

THEME_OPTIONS = [
    ("System", "system"),
    ("Light", "light"),
    ("Dark", "dark"),
]

LANGUAGE_OPTIONS = [
    ("English", "en"),
    ("中文", "zh"),
    ("日本語", "ja"),
    ("Deutsch", "de"),
    ("Français", "fr"),
]
