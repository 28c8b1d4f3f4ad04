"""Locale categories and how their current value is found in the environment."""

from __future__ import annotations

import enum
import locale
import os
from collections.abc import Iterator, Mapping


class Category(enum.IntEnum):
    """Locale categories, numbered as the running system numbers them."""

    COLLATE = locale.LC_COLLATE
    CTYPE = locale.LC_CTYPE
    MONETARY = locale.LC_MONETARY
    NUMERIC = locale.LC_NUMERIC
    TIME = locale.LC_TIME
    MESSAGES = getattr(locale, "LC_MESSAGES", -1)
    ALL = locale.LC_ALL


def category_to_name(category: int) -> str:
    """Return the symbolic name of *category*, ``LC_XXX`` if it is unknown."""
    try:
        member = Category(category)
    except ValueError:
        return "LC_XXX"
    return f"LC_{member.name}"


def guess_category_value(
    category: int, environ: Mapping[str, str] | None = None
) -> str:
    """Return the locale value for *category* taken from the environment.

    ``LANGUAGE`` comes first, then ``LC_ALL``, the category's own variable
    and ``LANG``; empty values are skipped and ``C`` is the fallback.
    """
    env = os.environ if environ is None else environ
    for variable in ("LANGUAGE", "LC_ALL", category_to_name(category), "LANG"):
        value = env.get(variable)
        if value:
            return value
    return "C"


def iter_locales(value: str) -> Iterator[str]:
    """Yield the locales of a colon-separated list, ending with ``C``.

    Empty elements are skipped. The sequence stops at the first ``C`` or
    ``POSIX`` entry, since no translation takes place past it.
    """
    for item in value.split(":"):
        if not item:
            continue
        yield item
        if item in ("C", "POSIX"):
            return
    yield "C"