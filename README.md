# nlscat

A small, dependency-free library for looking up translated messages in GNU
binary message catalogs (`.mo` files). It follows the classic lookup rules:
domain bindings, a current default text domain, locale names taken from the
`LANGUAGE`, `LC_ALL`, `LC_<category>` and `LANG` environment variables,
locale aliases from `locale.alias` files, and step-by-step loosening of a
locale name (for example `de_DE.ISO-8859-1@euro` down to `de`) until a
catalog is found.

## Installation

```
pip install nlscat
```

## Quick start

```python
from nlscat.translator import Translator
from nlscat.categories import Category

tr = Translator(
    default_dirname="/usr/share/locale",
    alias_path="/usr/share/locale",
    environ={"LANG": "de_DE.UTF-8"},
)

tr.bindtextdomain("myapp", "/opt/myapp/locale")
tr.textdomain("myapp")

print(tr.gettext("Hello"))                       # current default domain
print(tr.dgettext("otherapp", "Goodbye"))        # explicit domain
print(tr.dcgettext("myapp", "Today", Category.TIME))
```

Catalogs are looked for at
`<dirname>/<locale>/LC_<CATEGORY>/<domain>.mo`. A relative bound directory
is taken relative to the current working directory.

When no translation exists, or the locale resolves to `C` or `POSIX`, the
message id itself is returned; a `None` message id gives `None`. A `str`
message id gives a `str` result, a `bytes` one gives `bytes`.

`textdomain(None)` reports the current default domain, and
`textdomain("")` resets it to `messages`. `bindtextdomain(domain)` with no
directory reports the directory in force for that domain; an empty domain
name raises `ValueError`.

Module-level functions `bindtextdomain`, `textdomain`, `dcgettext`,
`dgettext` and `gettext` in `nlscat.translator` work on one shared
`Translator` that reads `os.environ`, with `/usr/local/share/locale` as its
default catalog directory and `/usr/local/share/locale:.` as its alias
search path.

## Lower-level pieces

- `nlscat.mofile.MoFile` reads a `.mo` file (either byte order) with
  `MoFile.load` or `MoFile.from_bytes` and looks messages up with `lookup`,
  through the catalog's hash table or by binary search; malformed data raises
  `CatalogError`.
- `nlscat.localename` splits locale names into a `LocaleName`
  (`explode_name`), normalizes codeset names (`normalize_codeset`, e.g.
  `ISO-8859-1` → `iso88591`), builds catalog paths (`build_filename`) and
  keeps the candidate catalog files in an `L10nFileList` of `L10nFile`
  entries, which load their catalog on first use.
- `nlscat.aliases.AliasTable` reads `locale.alias` files along a
  colon-separated search path, only as far as needed, and expands aliases
  case-insensitively.
- `nlscat.domains.DomainFinder` ties these together to find the catalog for a
  directory, locale and domain file name.
- `nlscat.bindings.DomainBindings` keeps the domain → directory bindings.
- `nlscat.categories` has the `Category` enum, `category_to_name`,
  `guess_category_value` and `iter_locales`.
- `nlscat.hashing.hash_string` is the hashpjw string hash used by `.mo` hash
  tables.
- `nlscat.zmodem` holds ZMODEM protocol constants, with enums `FrameType`,
  `FrameEnd` and `ReceiverCaps`. It is a set of constants only; the package
  has no file-transfer code.

## What it does not do

The package only reads catalogs. It does not compile `.po` files into `.mo`
files, has no plural-form lookup, and installs no command-line tools.

## Running the tests

```
pip install nlscat[test]
pytest
```