"""Theme preference persistence."""
from __future__ import annotations

import os
from typing import Any

import yaml

THEME_KEY = "theme"
DARK = "dark"
LIGHT = "light"


class PreferenceStore:
    """Small key/value store kept in a YAML file."""

    def __init__(self, path: str) -> None:
        self._path = path

    def _load(self) -> dict[str, Any]:
        if not os.path.exists(self._path):
            return {}
        with open(self._path, "r", encoding="utf-8") as handle:
            raw = yaml.safe_load(handle) or {}
        return raw if isinstance(raw, dict) else {}

    def get(self, key: str, default: str | None = None) -> str | None:
        value = self._load().get(key, default)
        return None if value is None else str(value)

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        directory = os.path.dirname(self._path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self._path, "w", encoding="utf-8") as handle:
            yaml.safe_dump(data, handle)


class ThemeController:
    def __init__(self, store: PreferenceStore) -> None:
        self._store = store

    def is_dark(self) -> bool:
        return self._store.get(THEME_KEY) == DARK

    def toggle(self) -> bool:
        now_dark = not self.is_dark()
        self._store.set(THEME_KEY, DARK if now_dark else LIGHT)
        return now_dark

    @staticmethod
    def label(is_dark: bool) -> str:
        return "Light Mode" if is_dark else "Dark Mode"
