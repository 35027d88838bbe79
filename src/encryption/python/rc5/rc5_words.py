#!/usr/bin/env python3
"""
RC5 Words
Fixed-width unsigned word arithmetic for the RC5 cipher.

RC5 is defined over a word of w bits. Each supported width is a class that
carries its own magic constants P and Q; words themselves are plain ints kept
within the width mask by every operation.
"""

from .rc5_errors import WordSizeError


class Word:
    """Base class for an unsigned word of BITS bits."""

    BITS = 0
    BYTES = 0
    MASK = 0
    ZERO = 0

    # magic constants Pw = Odd((e - 2) * 2^w), Qw = Odd((phi - 1) * 2^w)
    P = 0
    Q = 0

    @classmethod
    def from_u8(cls, value):
        """Cast an 8-bit value to a word."""
        return value & 0xFF

    @classmethod
    def from_bytes(cls, data):
        """
        Decode a word from exactly BYTES little-endian bytes.

        Args:
            data: Byte slice of length BYTES

        Returns:
            int: The decoded word
        """
        if len(data) != cls.BYTES:
            raise WordSizeError(
                f"Word size mis-match, expected {cls.BYTES} bytes, got {len(data)}"
            )
        return int.from_bytes(data, "little")

    @classmethod
    def to_bytes(cls, word):
        """Encode a word as BYTES little-endian bytes."""
        return (word & cls.MASK).to_bytes(cls.BYTES, "little")

    @classmethod
    def wrapping_add(cls, a, b):
        return (a + b) & cls.MASK

    @classmethod
    def wrapping_sub(cls, a, b):
        return (a - b) & cls.MASK

    @classmethod
    def rotate_left(cls, value, amount):
        """Rotate value left by another word's value modulo BITS."""
        n = amount % cls.BITS
        if n == 0:
            return value & cls.MASK
        return ((value << n) | (value >> (cls.BITS - n))) & cls.MASK

    @classmethod
    def rotate_right(cls, value, amount):
        """Rotate value right by another word's value modulo BITS."""
        n = amount % cls.BITS
        if n == 0:
            return value & cls.MASK
        return ((value >> n) | (value << (cls.BITS - n))) & cls.MASK

    @classmethod
    def random(cls, rng):
        """
        Draw a uniformly distributed word.

        Args:
            rng: Any generator exposing getrandbits, e.g. secrets.SystemRandom()
        """
        return rng.getrandbits(cls.BITS)


class Word16(Word):
    BITS = 16
    BYTES = 2
    MASK = 0xFFFF
    P = 0xB7E1
    Q = 0x9E37


class Word32(Word):
    BITS = 32
    BYTES = 4
    MASK = 0xFFFFFFFF
    P = 0xB7E15163
    Q = 0x9E3779B9


class Word64(Word):
    BITS = 64
    BYTES = 8
    MASK = 0xFFFFFFFFFFFFFFFF
    P = 0xB7E151628AED2A6B
    Q = 0x9E3779B97F4A7C15


class Word128(Word):
    BITS = 128
    BYTES = 16
    MASK = (1 << 128) - 1
    P = 0xB7E151628AED2A6ABF7158809CF4F3C7
    Q = 0x9E3779B97F4A7C15F39CC0605CEDC835


WORD_TYPES = {
    16: Word16,
    32: Word32,
    64: Word64,
    128: Word128,
}

SUPPORTED_WORD_SIZES = sorted(WORD_TYPES)


def word_for_bits(bits):
    """
    Resolve a word width in bits to its Word class.

    Args:
        bits: Word width (16, 32, 64 or 128)

    Returns:
        type: The matching Word subclass
    """
    try:
        return WORD_TYPES[int(bits)]
    except (KeyError, TypeError, ValueError):
        raise WordSizeError(
            f"Unsupported word size: {bits}. Must be one of {SUPPORTED_WORD_SIZES}."
        ) from None
