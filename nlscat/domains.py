"""Finding the message catalog for a locale, directory and domain."""

from __future__ import annotations

from nlscat.aliases import AliasTable
from nlscat.localename import L10nFile, L10nFileList, LocaleName, explode_name


def _load_first(entry: L10nFile) -> None:
    """Load *entry*, or failing that its successors until one has data."""
    if entry.ensure_loaded() is not None:
        return
    for successor in entry.successors:
        if successor.ensure_loaded() is not None:
            break


class DomainFinder:
    """Looks up catalog files and remembers every file already tried."""

    def __init__(self, aliases: AliasTable | None = None) -> None:
        self.aliases = aliases
        self.files = L10nFileList()

    def find(self, dirname: str, locale: str, domainname: str) -> L10nFile | None:
        """Return the entry for *locale* under *dirname* with file *domainname*.

        The entry's data, or that of one of its successors, holds the loaded
        catalog when there is one. A locale that names an alias is replaced
        by the alias value before it is split into its parts.
        """
        known = self.files.make(
            dirname, 0, LocaleName(language=locale), domainname, False
        )
        if known is not None:
            _load_first(known)
            return known

        if self.aliases is not None:
            alias_value = self.aliases.expand(locale)
            if alias_value is not None:
                locale = alias_value

        name = explode_name(locale)
        entry = self.files.make(dirname, name.mask, name, domainname, True)
        if entry is None:
            return None
        _load_first(entry)
        return entry