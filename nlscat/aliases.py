"""Aliases for locale names, read from ``locale.alias`` files."""

from __future__ import annotations

import os
from collections import deque
from collections.abc import Iterable

ALIAS_FILE_NAME = "locale.alias"


def _split_path(search_path: str | Iterable[str]) -> list[str]:
    if isinstance(search_path, str):
        return [part for part in search_path.split(":") if part]
    return [os.fspath(part) for part in search_path if part]


class AliasTable:
    """Locale aliases, loaded lazily from the directories of a search path."""

    def __init__(self, search_path: str | Iterable[str] = "") -> None:
        self._pending: deque[str] = deque(_split_path(search_path))
        self._map: dict[str, str] = {}

    def __len__(self) -> int:
        return len(self._map)

    def read_alias_file(self, directory: str | os.PathLike[str]) -> int:
        """Add the aliases of ``directory/locale.alias``; return how many were read.

        A missing or unreadable file adds nothing. Lines starting with ``#``
        are comments; a line needs an alias and a value to count.
        """
        path = os.path.join(os.fspath(directory), ALIAS_FILE_NAME)
        try:
            with open(path, encoding="latin-1") as handle:
                lines = handle.readlines()
        except OSError:
            return 0

        added = 0
        for line in lines:
            stripped = line.lstrip()
            if not stripped or stripped.startswith("#"):
                continue
            fields = stripped.split(None, 2)
            if len(fields) < 2:
                continue
            alias, value = fields[0], fields[1]
            self._map.setdefault(alias.lower(), value)
            added += 1
        return added

    def _load_next(self) -> int:
        """Read pending alias files until one adds entries; return that count."""
        while self._pending:
            added = self.read_alias_file(self._pending.popleft())
            if added:
                return added
        return 0

    def expand(self, name: str) -> str | None:
        """Return the locale *name* stands for, or None if it is no alias.

        The comparison ignores case. Alias files further along the search
        path are read only when the name is not yet known.
        """
        key = name.lower()
        while True:
            value = self._map.get(key)
            if value is not None:
                return value
            if not self._load_next():
                return None