#!/usr/bin/env python3
"""
RC5 Core
The RC5 control block: key schedule ownership and the single-block round transform.
"""

from .base import BlockCipherBase
from .rc5_key_schedule import RC5Key
from .rc5_words import Word32

RC5_ALGORITHM_ID = 1


class Version:
    """
    RC5 parametric version identifier.

    Parameters are arranged as (algorithm id, word size in bits, rounds,
    key length in bytes) and rendered as RC5-v<alg>/<bits>/<rounds>/<keylen>.
    """

    __slots__ = ("_params",)

    def __init__(self, algorithm_id, word_bits, rounds, key_length):
        self._params = (algorithm_id, word_bits, rounds, key_length)

    @property
    def algorithm_id(self):
        return self._params[0]

    @property
    def word_bits(self):
        return self._params[1]

    @property
    def rounds(self):
        return self._params[2]

    @property
    def key_length(self):
        return self._params[3]

    def as_tuple(self):
        return self._params

    def version(self):
        return "RC5-v{}/{}/{}/{}".format(*self._params)

    def __str__(self):
        return self.version()

    def __repr__(self):
        return f"Version({self.version()!r})"

    def __eq__(self, other):
        if not isinstance(other, Version):
            return NotImplemented
        return self._params == other._params

    def __hash__(self):
        return hash(self._params)


class RC5ControlBlock(BlockCipherBase):
    """
    RC5 control block.

    Holds the expanded key, the round count and the derived version. A
    control block never changes after construction, so one instance can be
    shared by any number of callers.
    """

    def __init__(self, key, rounds, word=Word32):
        """
        Build a control block from a raw key.

        Args:
            key: Raw key (1 to 255 bytes)
            rounds: Number of rounds (0 to 255)
            word: Word class, one of Word16, Word32, Word64, Word128
        """
        self._key = RC5Key(key, rounds, word)
        self._rounds = rounds
        self.word = word
        self._version = Version(
            RC5_ALGORITHM_ID,
            word.BITS,
            rounds,
            self._key.raw_len(),
        )

    @property
    def s_table(self):
        return self._key.s_table

    @property
    def rounds(self):
        return self._rounds

    @property
    def version(self):
        return self._version

    def parametric_version(self):
        return self._version.version()

    def control_block_version(self):
        return self._version.version()

    def block_size(self):
        return 2 * self.word.BYTES

    def word_size(self):
        return self.word.BYTES

    def encrypt_block(self, block):
        w = self.word
        s = self._key.s_table
        word_a, word_b = block

        word_a = w.wrapping_add(word_a, s[0])
        word_b = w.wrapping_add(word_b, s[1])

        for r in range(1, self._rounds + 1):
            word_a = w.wrapping_add(w.rotate_left(word_a ^ word_b, word_b), s[2 * r])
            word_b = w.wrapping_add(w.rotate_left(word_b ^ word_a, word_a), s[2 * r + 1])

        return (word_a, word_b)

    def decrypt_block(self, block):
        w = self.word
        s = self._key.s_table
        word_a, word_b = block

        for r in range(self._rounds, 0, -1):
            word_b = w.rotate_right(w.wrapping_sub(word_b, s[2 * r + 1]), word_a) ^ word_a
            word_a = w.rotate_right(w.wrapping_sub(word_a, s[2 * r]), word_b) ^ word_b

        word_b = w.wrapping_sub(word_b, s[1])
        word_a = w.wrapping_sub(word_a, s[0])

        return (word_a, word_b)

    def __repr__(self):
        return f"RC5ControlBlock({self.parametric_version()})"
