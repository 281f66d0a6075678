"""
Byte classification for colored dumps.
"""

from enum import Enum


class ByteCategory(Enum):
    """Visual category of a single byte."""
    PUNCTUATION = 'punctuation'
    DIGIT = 'digit'
    NEWLINE_CONTROL = 'newline'
    OTHER_CONTROL = 'control'
    PRINTABLE = 'printable'


PUNCTUATION_BYTES = frozenset(b".,?!:&'\"$#@-_")
DIGIT_BYTES = frozenset(b'0123456789')
NEWLINE_BYTES = frozenset((0x09, 0x0A, 0x0D))

# Bytes below this value are control bytes (space included)
CONTROL_LIMIT = 0x21

BLANK_CATEGORIES = frozenset((ByteCategory.NEWLINE_CONTROL, ByteCategory.OTHER_CONTROL))


def classify(byte: int) -> ByteCategory:
    """
    Classify a byte value into its visual category.

    Punctuation and digits are checked first, then the control range,
    which is split into newline-class bytes and everything else.

    Args:
        byte: Byte value (0-255)

    Returns:
        The ByteCategory of the byte

    Raises:
        ValueError: If byte is outside 0-255
    """
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"Byte value out of range: {byte}")

    if byte in PUNCTUATION_BYTES:
        return ByteCategory.PUNCTUATION
    elif byte in DIGIT_BYTES:
        return ByteCategory.DIGIT
    elif byte < CONTROL_LIMIT:
        if byte in NEWLINE_BYTES:
            return ByteCategory.NEWLINE_CONTROL
        return ByteCategory.OTHER_CONTROL
    return ByteCategory.PRINTABLE


def listing_char(byte: int) -> str:
    """Character shown for a byte in the text listing (blank for control bytes)."""
    if classify(byte) in BLANK_CATEGORIES:
        return ' '
    return chr(byte)
