import struct

import pytest

from nlscat.localename import (
    L10nFile,
    L10nFileList,
    LocaleMask,
    LocaleName,
    build_filename,
    explode_name,
    normalize_codeset,
)


def _mo_bytes(pairs):
    originals = sorted(pairs)
    count = len(originals)
    orig_tab = 28
    trans_tab = orig_tab + 8 * count
    strings_start = trans_tab + 8 * count
    blob = b""
    orig_desc = []
    trans_desc = []
    for key in originals:
        orig_desc.append((len(key), strings_start + len(blob)))
        blob += key + b"\0"
    for key in originals:
        value = pairs[key]
        trans_desc.append((len(value), strings_start + len(blob)))
        blob += value + b"\0"
    header = struct.pack("<7I", 0x950412DE, 0, count, orig_tab, trans_tab, 0, 0)
    tables = b"".join(struct.pack("<2I", *d) for d in orig_desc + trans_desc)
    return header + tables + blob


@pytest.mark.parametrize(
    "locale, expected",
    [
        ("de_DE", 32),
        ("de_DE.utf8", 48),
        ("de@euro", 192),
        ("de+a+s,sp_r", 199),
    ],
)
def test_explode_mask_bits_match_the_encoding(locale, expected):
    assert int(explode_name(locale).mask) == expected


def test_explode_full_xpg_name():
    name = explode_name("de_DE.ISO-8859-1@euro")
    assert name.language == "de"
    assert name.territory == "DE"
    assert name.codeset == "ISO-8859-1"
    assert name.normalized_codeset == "iso88591"
    assert name.modifier == "euro"
    assert name.mask == (
        LocaleMask.TERRITORY
        | LocaleMask.XPG_CODESET
        | LocaleMask.XPG_NORM_CODESET
        | LocaleMask.XPG_MODIFIER
        | LocaleMask.CEN_AUDIENCE
    )


def test_explode_plain_language():
    name = explode_name("fr")
    assert name == LocaleName(language="fr")
    assert name.mask == LocaleMask(0)


def test_explode_without_language_keeps_whole_name():
    name = explode_name("_DE")
    assert name.language == "_DE"
    assert name.territory is None
    assert name.mask == LocaleMask(0)


def test_explode_cen_name():
    name = explode_name("de_DE+audience+special,sponsor_rev")
    assert name.language == "de"
    assert name.territory == "DE"
    assert name.modifier == "audience"
    assert name.special == "special"
    assert name.sponsor == "sponsor"
    assert name.revision == "rev"
    assert name.mask == (
        LocaleMask.TERRITORY
        | LocaleMask.XPG_MODIFIER
        | LocaleMask.CEN_AUDIENCE
        | LocaleMask.CEN_SPECIAL
        | LocaleMask.CEN_SPONSOR
        | LocaleMask.CEN_REVISION
    )


def test_explode_normalized_codeset_is_dropped_when_equal():
    name = explode_name("de_DE.utf8")
    assert name.codeset == "utf8"
    assert name.normalized_codeset is None
    assert name.mask == LocaleMask.TERRITORY | LocaleMask.XPG_CODESET


def test_explode_xpg_clears_empty_parts():
    name = explode_name("de_.utf8@")
    assert name.territory == ""
    assert name.modifier == ""
    assert not name.mask & LocaleMask.TERRITORY
    assert not name.mask & LocaleMask.XPG_MODIFIER
    assert name.mask & LocaleMask.XPG_CODESET


def test_normalize_codeset_values():
    assert normalize_codeset("ISO-8859-1") == "iso88591"
    assert normalize_codeset("8859-1") == normalize_codeset("ISO-8859-1")
    assert normalize_codeset("utf8") == "utf8"


@pytest.mark.parametrize("codeset", ["UTF-8", "iso_8859-15", "EUC.JP", "1252"])
def test_normalize_codeset_is_idempotent_and_lower(codeset):
    once = normalize_codeset(codeset)
    assert normalize_codeset(once) == once
    assert once == once.lower()
    assert all(ch.isalnum() for ch in once)


def test_build_filename_xpg_parts():
    name = explode_name("de_DE.UTF-8@euro")
    path = build_filename(
        "/locale", LocaleMask.TERRITORY | LocaleMask.XPG_CODESET, name, "LC_MESSAGES/dom.mo"
    )
    assert path == "/locale/de_DE.UTF-8/LC_MESSAGES/dom.mo"
    modifier_path = build_filename("/locale", LocaleMask.XPG_MODIFIER, name, "x.mo")
    assert modifier_path == "/locale/de@euro/x.mo"
    audience_path = build_filename("/locale", LocaleMask.CEN_AUDIENCE, name, "x.mo")
    assert audience_path == "/locale/de+euro/x.mo"


def test_build_filename_cen_tail_and_dirlist():
    name = explode_name("de+aud+special,sponsor_rev")
    mask = LocaleMask.CEN_SPECIAL | LocaleMask.CEN_SPONSOR | LocaleMask.CEN_REVISION
    path = build_filename(["/a", "/b"], mask, name, "x.mo")
    assert path == "/a:/b/de+special,sponsor_rev/x.mo"


def test_make_without_allocate_finds_nothing_new():
    files = L10nFileList()
    name = LocaleName(language="de")
    assert files.make("/locale", 0, name, "x.mo", False) is None
    assert len(files) == 0


def test_make_allocates_once():
    files = L10nFileList()
    name = explode_name("de_DE")
    first = files.make("/locale", name.mask, name, "x.mo", True)
    again = files.make("/locale", name.mask, name, "x.mo", False)
    assert first is again
    assert first.filename == "/locale/de_DE/x.mo"
    assert first.decided is False
    assert [s.filename for s in first.successors] == ["/locale/de/x.mo"]


def test_make_successors_never_combine_both_codesets():
    files = L10nFileList()
    name = explode_name("de_DE.ISO-8859-1")
    entry = files.make("/locale", name.mask, name, "x.mo", True)
    assert entry.decided is True
    names = [s.filename for s in entry.successors]
    assert len(names) == len(set(names))
    assert entry.filename not in names
    assert not any(".ISO-8859-1" in n and ".iso88591" in n for n in names)
    assert names[-1] == "/locale/de/x.mo"


def test_make_with_several_directories():
    files = L10nFileList()
    name = LocaleName(language="de")
    entry = files.make(["/a", "/b"], 0, name, "x.mo", True)
    assert entry.decided is True
    assert entry.filename == "/a:/b/de/x.mo"
    assert [s.filename for s in entry.successors] == ["/a/de/x.mo", "/b/de/x.mo"]


def test_ensure_loaded_reads_catalog(tmp_path):
    name = LocaleName(language="de")
    target = tmp_path / "de" / "LC_MESSAGES"
    target.mkdir(parents=True)
    (target / "dom.mo").write_bytes(_mo_bytes({b"Hello": b"Hallo"}))
    files = L10nFileList()
    entry = files.make(str(tmp_path), 0, name, "LC_MESSAGES/dom.mo", True)
    catalog = entry.ensure_loaded()
    assert entry.decided is True
    assert catalog.lookup("Hello") == "Hallo"
    assert entry.ensure_loaded() is catalog


def test_ensure_loaded_missing_or_bad_file(tmp_path):
    missing = L10nFile(filename=str(tmp_path / "nothing.mo"))
    assert missing.ensure_loaded() is None
    assert missing.decided is True
    bad_path = tmp_path / "bad.mo"
    bad_path.write_bytes(b"not a catalog at all, really not")
    bad = L10nFile(filename=str(bad_path))
    assert bad.ensure_loaded() is None
    nameless = L10nFile(filename=None)
    assert nameless.ensure_loaded() is None
    assert nameless.decided is True