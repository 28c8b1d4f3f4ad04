"""Binding message domains to the directories holding their catalogs."""

from __future__ import annotations

from collections.abc import Iterator


class DomainBindings:
    """Maps domain names to catalog directories, with a default directory."""

    def __init__(self, default_dirname: str) -> None:
        self.default_dirname = default_dirname
        self._bindings: dict[str, str] = {}

    def __len__(self) -> int:
        return len(self._bindings)

    def __contains__(self, domainname: object) -> bool:
        return domainname in self._bindings

    def __iter__(self) -> Iterator[str]:
        """Iterate over the bound domain names in sorted order."""
        return iter(sorted(self._bindings))

    def bind(self, domainname: str, dirname: str | None = None) -> str:
        """Bind *domainname* to *dirname* and return the directory now in force.

        With *dirname* None the current binding is only queried; an unbound
        domain reports the default directory. An empty domain name is refused.
        """
        if not domainname:
            raise ValueError("domain name must not be empty")
        if dirname is None:
            return self.dirname_for(domainname)
        self._bindings[domainname] = dirname
        return dirname

    def dirname_for(self, domainname: str) -> str:
        """Return the directory bound to *domainname*, or the default one."""
        return self._bindings.get(domainname, self.default_dirname)