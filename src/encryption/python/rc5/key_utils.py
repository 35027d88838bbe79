#!/usr/bin/env python3
"""
RC5 Bench - RC5 Key Utilities
Provides key generation and hex decoding helpers for RC5.
"""

import binascii
import secrets

from .rc5_errors import ParseHexError
from .rc5_key_schedule import MAX_KEY_BYTES


def format_key_size(size_bits):

    # convert key size from bits to bytes
    return size_bits // 8


def generate_key(key_size=128):
    """
    Generate a random RC5 key.

    Args:
        key_size: Key size in bits, a multiple of 8 between 8 and 2040

    Returns:
        bytes: Random key
    """
    if key_size % 8 != 0:
        raise ValueError(f"Invalid key size: {key_size} bits. Must be a multiple of 8.")

    key_bytes = format_key_size(key_size)
    if not 0 < key_bytes <= MAX_KEY_BYTES:
        raise ValueError(
            f"Invalid key size: {key_size} bits. Must be between 8 and {MAX_KEY_BYTES * 8} bits."
        )

    return secrets.token_bytes(key_bytes)


def decode_hex(hex_string):
    """
    Decode a hex string into bytes.

    Args:
        hex_string: str or bytes of hex digits

    Returns:
        bytes: Decoded bytes
    """
    if isinstance(hex_string, str):
        try:
            hex_string = hex_string.encode("ascii")
        except UnicodeEncodeError as e:
            raise ParseHexError(str(e)) from e

    try:
        return binascii.unhexlify(hex_string)
    except (binascii.Error, TypeError) as e:
        raise ParseHexError(str(e)) from e
