"""UTF-8 decoding of a single code point at a time.

The field tokenizer decodes raw buffers one code point at a time and needs to know how many
bytes each code point consumed. `decode_rune` wraps the standard UTF-8 codec to provide
exactly that, reporting a zero width where no well-formed code point starts.
"""

import codecs

__all__ = ["RUNE_ERROR", "UTF_MAX", "decode_rune", "rune_len"]

RUNE_ERROR = 0xFFFD
"""The Unicode replacement character, returned alongside a zero width."""

UTF_MAX = 4
"""Maximum number of bytes of a UTF-8 encoded code point."""


def decode_rune(buf: bytes | bytearray | memoryview, offset: int = 0) -> tuple[int, int]:
    """Decode the UTF-8 encoded code point starting at ``buf[offset]``.

    Args:
        buf (bytes or bytearray or memoryview): The encoded buffer.
        offset (int): The byte offset to decode at. Defaults to 0.

    Returns:
        tuple[int, int]: The code point and the number of bytes it occupies. The width is 0,
            and the code point `RUNE_ERROR`, if ``offset`` is at or past the end of ``buf`` or
            the bytes there are malformed or truncated.
    """
    if offset < 0 or offset >= len(buf):
        return RUNE_ERROR, 0

    first = buf[offset]
    if first < 0x80:
        return first, 1

    chunk = bytes(buf[offset : offset + UTF_MAX])
    try:
        text, _ = codecs.utf_8_decode(chunk, "strict", False)
    except UnicodeDecodeError as e:
        if e.start == 0:
            return RUNE_ERROR, 0
        # The first code point is well-formed, the damage lies further ahead
        text = chunk[: e.start].decode("utf-8")
    if not text:
        return RUNE_ERROR, 0
    r = ord(text[0])
    return r, rune_len(r)


def rune_len(r: int) -> int:
    """Return the number of bytes needed to encode r in UTF-8.

    Args:
        r (int): The code point.

    Returns:
        int: 1 to 4, or -1 if r is not a valid Unicode scalar value.
    """
    if r < 0:
        return -1
    elif r < 0x80:
        return 1
    elif r < 0x800:
        return 2
    elif 0xD800 <= r <= 0xDFFF:
        return -1
    elif r < 0x10000:
        return 3
    elif r <= 0x10FFFF:
        return 4
    return -1
