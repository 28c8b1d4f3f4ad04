"""Message lookup by domain and locale category, with a process-wide default."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping

from nlscat.aliases import AliasTable
from nlscat.bindings import DomainBindings
from nlscat.categories import (
    Category,
    category_to_name,
    guess_category_value,
    iter_locales,
)
from nlscat.domains import DomainFinder
from nlscat.localename import L10nFile

DEFAULT_DOMAIN = "messages"
DEFAULT_DIRNAME = "/usr/local/share/locale"
DEFAULT_ALIAS_PATH = "/usr/local/share/locale:."

_UNTRANSLATED_LOCALES = ("C", "POSIX")


def _find_msg(entry: L10nFile, msgid: str | bytes) -> str | bytes | None:
    catalog = entry.ensure_loaded()
    if catalog is None:
        return None
    return catalog.lookup(msgid)


class Translator:
    """Translates messages using catalogs found through domain bindings."""

    def __init__(
        self,
        default_dirname: str = DEFAULT_DIRNAME,
        alias_path: str | Iterable[str] = DEFAULT_ALIAS_PATH,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self.bindings = DomainBindings(default_dirname)
        self.finder = DomainFinder(AliasTable(alias_path))
        self.environ = environ
        self.current_domain = DEFAULT_DOMAIN

    def bindtextdomain(self, domainname: str, dirname: str | None = None) -> str:
        """Bind *domainname* to *dirname*; with None, report the binding."""
        return self.bindings.bind(domainname, dirname)

    def textdomain(self, domainname: str | None = None) -> str:
        """Set the default domain and return it; None only queries it.

        An empty name resets the default domain to ``messages``.
        """
        if domainname is None:
            return self.current_domain
        self.current_domain = domainname or DEFAULT_DOMAIN
        return self.current_domain

    def _resolve_dirname(self, domainname: str) -> str | None:
        if domainname not in self.bindings:
            return self.bindings.default_dirname
        dirname = self.bindings.dirname_for(domainname)
        if dirname.startswith("/"):
            return dirname
        try:
            cwd = os.getcwd()
        except OSError:
            return None
        return f"{cwd}/{dirname}"

    def dcgettext(
        self,
        domainname: str | None,
        msgid: str | bytes | None,
        category: int = Category.MESSAGES,
    ) -> str | bytes | None:
        """Translate *msgid* in *domainname* for the locale of *category*.

        Returns *msgid* itself when no translation is found, and None when
        *msgid* is None. A None domain means the current default domain.
        """
        if msgid is None:
            return None
        if domainname is None:
            domainname = self.current_domain

        dirname = self._resolve_dirname(domainname)
        if dirname is None:
            return msgid

        categoryname = category_to_name(category)
        categoryvalue = guess_category_value(category, self.environ)
        xdomainname = f"{categoryname}/{domainname}.mo"

        for single_locale in iter_locales(categoryvalue):
            if single_locale in _UNTRANSLATED_LOCALES:
                return msgid
            entry = self.finder.find(dirname, single_locale, xdomainname)
            if entry is None:
                continue
            found = _find_msg(entry, msgid)
            if found is None:
                for successor in entry.successors:
                    found = _find_msg(successor, msgid)
                    if found is not None:
                        break
            if found is not None:
                return found
        return msgid

    def dgettext(
        self, domainname: str | None, msgid: str | bytes | None
    ) -> str | bytes | None:
        """Translate *msgid* in *domainname* for the messages category."""
        return self.dcgettext(domainname, msgid, Category.MESSAGES)

    def gettext(self, msgid: str | bytes | None) -> str | bytes | None:
        """Translate *msgid* in the current default domain."""
        return self.dgettext(None, msgid)


_default_translator = Translator()


def bindtextdomain(domainname: str, dirname: str | None = None) -> str:
    """Bind a domain in the process-wide translator."""
    return _default_translator.bindtextdomain(domainname, dirname)


def textdomain(domainname: str | None = None) -> str:
    """Set or query the default domain of the process-wide translator."""
    return _default_translator.textdomain(domainname)


def dcgettext(
    domainname: str | None,
    msgid: str | bytes | None,
    category: int = Category.MESSAGES,
) -> str | bytes | None:
    """Translate with the process-wide translator for a given category."""
    return _default_translator.dcgettext(domainname, msgid, category)


def dgettext(domainname: str | None, msgid: str | bytes | None) -> str | bytes | None:
    """Translate in a given domain with the process-wide translator."""
    return _default_translator.dgettext(domainname, msgid)


def gettext(msgid: str | bytes | None) -> str | bytes | None:
    """Translate in the default domain with the process-wide translator."""
    return _default_translator.gettext(msgid)