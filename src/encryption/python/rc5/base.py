#!/usr/bin/env python3
"""
RC5 Bench - Block Cipher Base
Provides the base class every control block must implement to work with Cipher.
"""

from abc import ABC, abstractmethod

from .rc5_errors import WordSizeError

# words per block; fixed for RC5
BLOCK_WORDS = 2


class BlockCipherBase(ABC):
    """Base class for word-oriented block ciphers."""

    # Word class of the cipher, set by subclasses
    word = None

    @abstractmethod
    def control_block_version(self):
        """Human-readable parametric version, e.g. "RC5-v1/32/12/16"."""
        pass

    @abstractmethod
    def block_size(self):
        """Block size in bytes."""
        pass

    @abstractmethod
    def word_size(self):
        """Word size in bytes."""
        pass

    @abstractmethod
    def encrypt_block(self, block):
        """
        Encrypt a single block.

        Args:
            block: Tuple of BLOCK_WORDS words

        Returns:
            tuple: Encrypted block
        """
        pass

    @abstractmethod
    def decrypt_block(self, block):
        """
        Decrypt a single block.

        Args:
            block: Tuple of BLOCK_WORDS words

        Returns:
            tuple: Decrypted block
        """
        pass

    def generate_blocks(self, data):
        """
        Split a byte stream into blocks of little-endian words.

        Args:
            data: Bytes whose length is a multiple of the block size

        Returns:
            list: List of word tuples
        """
        bs = self.block_size()
        ws = self.word_size()
        if len(data) % bs != 0:
            raise WordSizeError(
                f"Data length {len(data)} is not a multiple of block size {bs}"
            )

        blocks = []
        for offset in range(0, len(data), bs):
            chunk = data[offset:offset + bs]
            blocks.append(tuple(
                self.word.from_bytes(chunk[k:k + ws]) for k in range(0, bs, ws)
            ))
        return blocks

    def generate_bytes_stream(self, blocks):
        """
        Serialize blocks back into a byte stream.

        Args:
            blocks: Iterable of word tuples

        Returns:
            bytes: Concatenated little-endian words
        """
        stream = bytearray()
        for block in blocks:
            for word in block:
                stream += self.word.to_bytes(word)
        return bytes(stream)
