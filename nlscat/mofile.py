"""Reading and searching binary GNU message catalogs (``.mo`` files)."""

from __future__ import annotations

import bisect
import os
import struct

from nlscat.hashing import hash_string

MAGIC = 0x950412DE
MAGIC_SWAPPED = 0xDE120495
MO_REVISION_NUMBER = 0

_HEADER_FIELDS = 7
_HEADER_SIZE = 4 * _HEADER_FIELDS


class CatalogError(ValueError):
    """Raised when data is not a usable message catalog."""


def _read_strings(
    data: bytes, byte_order: str, offset: int, count: int
) -> list[bytes]:
    end = offset + 8 * count
    if offset < 0 or end > len(data):
        raise CatalogError("string table lies outside the catalog")
    descriptors = struct.unpack_from(f"{byte_order}{2 * count}I", data, offset)
    strings = []
    for length, start in zip(descriptors[0::2], descriptors[1::2]):
        if start + length > len(data):
            raise CatalogError("string lies outside the catalog")
        strings.append(bytes(data[start : start + length]))
    return strings


class MoFile:
    """A loaded message catalog: original strings and their translations."""

    def __init__(
        self,
        originals: list[bytes],
        translations: list[bytes],
        hash_table: list[int] | None = None,
        encoding: str = "utf-8",
    ) -> None:
        if len(originals) != len(translations):
            raise CatalogError("original and translation tables differ in size")
        self.originals = originals
        self.translations = translations
        self.hash_table = hash_table or []
        self.encoding = encoding

    @classmethod
    def from_bytes(cls, data: bytes) -> MoFile:
        """Parse catalog *data*, raising CatalogError if it is not valid."""
        data = bytes(data)
        if len(data) < _HEADER_SIZE:
            raise CatalogError("catalog is shorter than its header")
        (magic,) = struct.unpack_from("<I", data, 0)
        if magic == MAGIC:
            byte_order = "<"
        elif magic == MAGIC_SWAPPED:
            byte_order = ">"
        else:
            raise CatalogError(f"bad magic number 0x{magic:08x}")

        (
            _magic,
            revision,
            nstrings,
            orig_offset,
            trans_offset,
            hash_size,
            hash_offset,
        ) = struct.unpack_from(f"{byte_order}{_HEADER_FIELDS}I", data, 0)
        if revision != MO_REVISION_NUMBER:
            raise CatalogError(f"unsupported catalog revision {revision}")

        originals = _read_strings(data, byte_order, orig_offset, nstrings)
        translations = _read_strings(data, byte_order, trans_offset, nstrings)

        hash_table: list[int] = []
        if hash_size > 2:
            if hash_offset + 4 * hash_size > len(data):
                raise CatalogError("hash table lies outside the catalog")
            hash_table = list(
                struct.unpack_from(f"{byte_order}{hash_size}I", data, hash_offset)
            )
            if any(entry > nstrings for entry in hash_table):
                raise CatalogError("hash table refers to a missing string")
        return cls(originals, translations, hash_table)

    @classmethod
    def load(cls, path: str | os.PathLike[str]) -> MoFile:
        """Read and parse the catalog file at *path*."""
        try:
            with open(path, "rb") as handle:
                data = handle.read()
        except OSError as exc:
            raise CatalogError(f"cannot read catalog {os.fspath(path)!r}") from exc
        return cls.from_bytes(data)

    def _find(self, key: bytes) -> bytes | None:
        size = len(self.hash_table)
        if size > 2:
            hval = hash_string(key)
            idx = hval % size
            incr = 1 + hval % (size - 2)
            for _ in range(size):
                nstr = self.hash_table[idx]
                if nstr == 0:
                    return None
                if self.originals[nstr - 1] == key:
                    return self.translations[nstr - 1]
                idx = idx - (size - incr) if idx >= size - incr else idx + incr
            return None

        pos = bisect.bisect_left(self.originals, key)
        if pos < len(self.originals) and self.originals[pos] == key:
            return self.translations[pos]
        return None

    def lookup(self, msgid: str | bytes) -> str | bytes | None:
        """Return the translation of *msgid*, or None if there is none.

        A str message id gives a str result; a bytes one gives bytes.
        """
        if isinstance(msgid, str):
            found = self._find(msgid.encode(self.encoding))
            return None if found is None else found.decode(self.encoding)
        return self._find(bytes(msgid))

    def __len__(self) -> int:
        return len(self.originals)