#!/usr/bin/env python3
"""
RC5 Key Schedule
Expands a raw byte key into the RC5 round-key table (the S-table).
Based on RFC 2040, section 4.
"""

from .rc5_errors import InvalidKeyError, InvalidRoundsError, KeyTooLongError
from .rc5_words import Word32

MAX_KEY_BYTES = 255
MAX_ROUNDS = 255


def expand_key(key, rounds, word=Word32):
    """
    Expand a raw key into an S-table of 2 * (rounds + 1) words.

    Args:
        key: Raw key bytes
        rounds: Number of rounds
        word: Word class defining the width and the P/Q constants

    Returns:
        list: The expanded S-table
    """
    word_bytes = word.BYTES

    # RC5Key rejects empty keys before this point
    key_length = max(len(key), 1)

    # pack key bytes into little-endian words, last byte first
    expanded_length = (key_length + word_bytes - 1) // word_bytes
    key_words = [word.ZERO] * expanded_length

    for index in range(key_length - 1, -1, -1):
        ix = index // word_bytes
        key_words[ix] = word.wrapping_add(
            word.rotate_left(key_words[ix], 8),
            word.from_u8(key[index]),
        )

    # initialise the S-table from the magic constants
    table_size = 2 * (rounds + 1)
    s_table = [word.ZERO] * table_size
    s_table[0] = word.P

    for i in range(1, table_size):
        s_table[i] = word.wrapping_add(s_table[i - 1], word.Q)

    # mix the secret key into the S-table
    i = j = 0
    a = b = word.ZERO

    for _ in range(3 * max(table_size, expanded_length)):
        a = word.rotate_left(
            word.wrapping_add(word.wrapping_add(s_table[i], a), b),
            3,
        )
        b = word.rotate_left(
            word.wrapping_add(word.wrapping_add(key_words[j], a), b),
            word.wrapping_add(a, b),
        )

        s_table[i] = a
        key_words[j] = b

        i = (i + 1) % table_size
        j = (j + 1) % expanded_length

    return s_table


def _key_to_bytes(key):
    if isinstance(key, str):
        return key.encode("utf-8")
    if isinstance(key, (bytes, bytearray, memoryview)):
        return bytes(key)
    raise TypeError(f"Key must be bytes, bytearray or str, got {type(key).__name__}")


class RC5Key:
    """Raw RC5 key together with its expanded S-table."""

    def __init__(self, key, rounds, word=Word32):
        """
        Validate the key material and expand it.

        Args:
            key: Raw key (1 to 255 bytes); str keys are UTF-8 encoded
            rounds: Number of rounds (0 to 255)
            word: Word class to expand the key for
        """
        raw_key = _key_to_bytes(key)

        if len(raw_key) == 0:
            raise InvalidKeyError()

        if len(raw_key) > MAX_KEY_BYTES:
            raise KeyTooLongError(current=len(raw_key), supported=MAX_KEY_BYTES)

        if isinstance(rounds, bool) or not isinstance(rounds, int):
            raise TypeError(f"Rounds must be an int, got {type(rounds).__name__}")

        if rounds < 0 or rounds > MAX_ROUNDS:
            raise InvalidRoundsError(rounds)

        self._raw_key = raw_key
        self._s_table = tuple(expand_key(raw_key, rounds, word))
        self.word = word

    @property
    def raw_key(self):
        return self._raw_key

    @property
    def s_table(self):
        return self._s_table

    def raw_len(self):
        return len(self._raw_key)
