"""Reading and writing of simple ``key=value`` property files such as ``.desktop`` entries."""

from __future__ import annotations

import os
from typing import Any

__all__ = ["DesktopProperties"]


class DesktopProperties:
    """Properties of one group of a ``.desktop``-style file.

    Unlike generic INI parsers, ``;`` is not treated as a comment marker, so
    values such as ``Categories=Utility;System;`` survive a round trip.
    """

    def __init__(self, file_name: str | os.PathLike[str] = "", group: str = "") -> None:
        self._data: dict[str, Any] = {}
        if file_name:
            try:
                self.load(file_name, group)
            except OSError:
                # A missing file simply yields an empty set of properties.
                pass

    def load(self, file_name: str | os.PathLike[str], group: str = "") -> None:
        """Replace the current properties with those read from ``file_name``.

        Only keys inside ``group`` are read; with an empty group every
        assignment in the file is read. Raises ``OSError`` if the file
        cannot be opened.
        """
        with open(file_name, encoding="utf-8") as handle:
            self._data.clear()
            wanted = group.strip()
            in_group = not group
            for line in handle:
                line = line.rstrip("\n")
                stripped = line.strip()
                if not stripped:
                    continue
                if group and stripped.startswith("["):
                    in_group = wanted == stripped.replace("[", "").replace("]", "")
                key, sep, value = line.partition("=")
                if in_group and sep:
                    self._data[key.strip()] = value.strip()

    def save(self, file_name: str | os.PathLike[str], group: str = "") -> None:
        """Write the properties, sorted by key, under an optional group header."""
        with open(file_name, "w", encoding="utf-8") as handle:
            if group:
                handle.write(f"[{group}]\n")
            for key in self.keys():
                handle.write(f"{key}={self._data[key]}\n")

    def value(self, key: str, default: Any = None) -> Any:
        """Return the value stored under ``key``, or ``default``."""
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        self._data[key] = value

    def contains(self, key: str) -> bool:
        """Return whether ``key`` is present."""
        return key in self._data

    def keys(self) -> list[str]:
        """Return the keys in sorted order."""
        return sorted(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data