"""Message catalog lookup for GNU .mo files with locale and alias handling."""

__version__ = "0.1.0"
__all__ = [
    "aliases",
    "bindings",
    "categories",
    "domains",
    "hashing",
    "localename",
    "mofile",
    "translator",
    "zmodem",
]