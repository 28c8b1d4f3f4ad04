"""Locale name parsing and the list of candidate catalog files for a locale."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass, field

from nlscat.mofile import CatalogError, MoFile


class LocaleMask(enum.IntFlag):
    """Bits marking which parts of a locale name are present."""

    CEN_REVISION = 1
    CEN_SPONSOR = 2
    CEN_SPECIAL = 4
    XPG_NORM_CODESET = 8
    XPG_CODESET = 16
    TERRITORY = 32
    CEN_AUDIENCE = 64
    XPG_MODIFIER = 128

    CEN_SPECIFIC = CEN_REVISION | CEN_SPONSOR | CEN_SPECIAL | CEN_AUDIENCE
    XPG_SPECIFIC = XPG_CODESET | XPG_NORM_CODESET | XPG_MODIFIER


@dataclass(frozen=True)
class LocaleName:
    """The parts of a locale name in XPG or CEN syntax."""

    language: str
    territory: str | None = None
    codeset: str | None = None
    normalized_codeset: str | None = None
    modifier: str | None = None
    special: str | None = None
    sponsor: str | None = None
    revision: str | None = None
    mask: LocaleMask = LocaleMask(0)


class _Syntax(enum.Enum):
    UNDECIDED = enum.auto()
    XPG = enum.auto()
    CEN = enum.auto()


def _scan(text: str, start: int, stops: str) -> int:
    """Return the index of the first character in *stops* at or after *start*."""
    return next(
        (pos for pos in range(start, len(text)) if text[pos] in stops), len(text)
    )


def _char_at(text: str, pos: int) -> str:
    return text[pos : pos + 1]


def normalize_codeset(codeset: str) -> str:
    """Return the canonical spelling of a codeset name.

    Letters are lower-cased, digits kept and everything else dropped; a name
    made of digits only gets an ``iso`` prefix.
    """
    kept = [ch for ch in codeset if ch.isascii() and ch.isalnum()]
    only_digits = not any(ch.isalpha() for ch in kept)
    body = "".join(ch.lower() for ch in kept)
    return "iso" + body if only_digits else body


def explode_name(name: str) -> LocaleName:
    """Split a locale *name* into its parts.

    XPG syntax is ``language[_territory[.codeset]][@modifier]``; CEN syntax is
    ``language[_territory][+audience][+special][,[sponsor][_revision]]``.
    """
    mask = LocaleMask(0)
    syntax = _Syntax.UNDECIDED
    territory = codeset = normalized = modifier = None
    special = sponsor = revision = None

    pos = _scan(name, 0, "_@+,")
    language = name[:pos]

    if pos == 0:
        # No language part: use the whole entry unexploded, it may be an alias.
        language = name
        pos = len(name)
    elif _char_at(name, pos) == "_":
        start = pos + 1
        pos = _scan(name, start, ".@+,_")
        territory = name[start:pos]
        mask |= LocaleMask.TERRITORY

        if _char_at(name, pos) == ".":
            syntax = _Syntax.XPG
            start = pos + 1
            pos = _scan(name, start, "@")
            codeset = name[start:pos]
            mask |= LocaleMask.XPG_CODESET
            if codeset:
                candidate = normalize_codeset(codeset)
                if candidate != codeset:
                    normalized = candidate
                    mask |= LocaleMask.XPG_NORM_CODESET

    ch = _char_at(name, pos)
    if ch == "@" or (syntax is not _Syntax.XPG and ch == "+"):
        syntax = _Syntax.XPG if ch == "@" else _Syntax.CEN
        start = pos + 1
        pos = _scan(name, start, "+,_") if syntax is _Syntax.CEN else len(name)
        modifier = name[start:pos]
        mask |= LocaleMask.XPG_MODIFIER | LocaleMask.CEN_AUDIENCE

    ch = _char_at(name, pos)
    if syntax is not _Syntax.XPG and ch in ("+", ",", "_"):
        syntax = _Syntax.CEN

        if ch == "+":
            start = pos + 1
            pos = _scan(name, start, ",_")
            special = name[start:pos]
            mask |= LocaleMask.CEN_SPECIAL
            ch = _char_at(name, pos)

        if ch == ",":
            start = pos + 1
            pos = _scan(name, start, "_")
            sponsor = name[start:pos]
            mask |= LocaleMask.CEN_SPONSOR
            ch = _char_at(name, pos)

        if ch == "_":
            revision = name[pos + 1 :]
            pos = len(name)
            mask |= LocaleMask.CEN_REVISION

    # Empty XPG parts are not worth a separate file name.
    if syntax is _Syntax.XPG:
        if territory == "":
            mask &= ~LocaleMask.TERRITORY
        if codeset == "":
            mask &= ~LocaleMask.XPG_CODESET
        if modifier == "":
            mask &= ~LocaleMask.XPG_MODIFIER

    return LocaleName(
        language=language,
        territory=territory,
        codeset=codeset,
        normalized_codeset=normalized,
        modifier=modifier,
        special=special,
        sponsor=sponsor,
        revision=revision,
        mask=mask,
    )


def _dirs(dirlist: str | Iterable[str]) -> tuple[str, ...]:
    if isinstance(dirlist, str):
        return (dirlist,)
    return tuple(dirlist)


def build_filename(
    directory: str | Iterable[str], mask: int, name: LocaleName, filename: str
) -> str:
    """Return the catalog path for the parts of *name* selected by *mask*.

    Several directories are joined with ``:`` as the directory part.
    """
    mask = LocaleMask(mask)
    parts = [":".join(_dirs(directory)), "/", name.language]
    if mask & LocaleMask.TERRITORY:
        parts += ["_", name.territory or ""]
    if mask & LocaleMask.XPG_CODESET:
        parts += [".", name.codeset or ""]
    if mask & LocaleMask.XPG_NORM_CODESET:
        parts += [".", name.normalized_codeset or ""]
    if mask & (LocaleMask.XPG_MODIFIER | LocaleMask.CEN_AUDIENCE):
        parts += ["+" if mask & LocaleMask.CEN_AUDIENCE else "@", name.modifier or ""]
    if mask & LocaleMask.CEN_SPECIAL:
        parts += ["+", name.special or ""]
    if mask & (LocaleMask.CEN_SPONSOR | LocaleMask.CEN_REVISION):
        parts.append(",")
        if mask & LocaleMask.CEN_SPONSOR:
            parts.append(name.sponsor or "")
        if mask & LocaleMask.CEN_REVISION:
            parts += ["_", name.revision or ""]
    parts += ["/", filename]
    return "".join(parts)


@dataclass(eq=False)
class L10nFile:
    """One candidate catalog file and the less specific files behind it."""

    filename: str | None
    decided: bool = False
    data: MoFile | None = None
    successors: list[L10nFile] = field(default_factory=list)

    def ensure_loaded(self) -> MoFile | None:
        """Load the catalog on first use; return it, or None if unusable."""
        if not self.decided:
            self.decided = True
            self.data = None
            if self.filename is not None:
                try:
                    self.data = MoFile.load(self.filename)
                except CatalogError:
                    self.data = None
        return self.data


class L10nFileList:
    """The catalog files already considered, keyed by file name."""

    def __init__(self) -> None:
        self._files: dict[str, L10nFile] = {}

    def __len__(self) -> int:
        return len(self._files)

    def make(
        self,
        dirlist: str | Iterable[str],
        mask: int,
        name: LocaleName,
        filename: str,
        allocate: bool,
    ) -> L10nFile | None:
        """Return the entry for *name* in *dirlist*, creating it if *allocate*.

        A new entry gets as successors the entries for every less specific
        combination of the locale parts, in each directory of *dirlist*.
        """
        dirs = _dirs(dirlist)
        mask = LocaleMask(mask)
        abs_filename = build_filename(dirs, mask, name, filename)

        existing = self._files.get(abs_filename)
        if existing is not None or not allocate:
            return existing

        both_codesets = LocaleMask.XPG_CODESET | LocaleMask.XPG_NORM_CODESET
        entry = L10nFile(
            filename=abs_filename,
            decided=len(dirs) != 1 or (mask & both_codesets) == both_codesets,
        )
        self._files[abs_filename] = entry

        # With a real list of directories the entry itself is not a file, so
        # the full mask is spread over the directories too.
        top = int(mask) - 1 if len(dirs) == 1 else int(mask)
        for cnt in range(top, -1, -1):
            if cnt & ~int(mask):
                continue
            if cnt & LocaleMask.CEN_SPECIFIC and cnt & LocaleMask.XPG_SPECIFIC:
                continue
            if cnt & LocaleMask.XPG_CODESET and cnt & LocaleMask.XPG_NORM_CODESET:
                continue
            for directory in dirs:
                successor = self.make(directory, cnt, name, filename, True)
                if successor is not None:
                    entry.successors.append(successor)
        return entry