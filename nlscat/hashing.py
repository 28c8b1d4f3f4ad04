"""String hashing used by the hash table of binary message catalogs."""

HASHWORDBITS = 32
_WORD_MASK = (1 << HASHWORDBITS) - 1
_TOP_NIBBLE = 0xF << (HASHWORDBITS - 4)


def hash_string(text: str | bytes) -> int:
    """Return the 32-bit ``hashpjw`` value of *text*.

    Strings are hashed as their UTF-8 encoding; bytes are hashed as they are.
    """
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    hval = 0
    for byte in data:
        hval = ((hval << 4) + byte) & _WORD_MASK
        top = hval & _TOP_NIBBLE
        if top:
            hval ^= top >> (HASHWORDBITS - 8)
            hval ^= top
    return hval