#!/usr/bin/env python3
"""
RC5 Bench - RC5 Implementation
Byte-stream encryption/decryption over an RC5 control block with mode dispatch,
plus the benchmark-facing RC5Implementation.
"""

import logging

from .base import BLOCK_WORDS, BlockCipherBase
from .key_utils import decode_hex, format_key_size, generate_key
from .rc5_core import RC5ControlBlock
from .rc5_errors import IVInvalidError, NonceInvalidError, PaddingError
from .rc5_modes import (
    CBC,
    CTR,
    ECB,
    cbc_decrypt,
    cbc_encrypt,
    ctr_decrypt,
    ctr_encrypt,
    ecb_decrypt,
    ecb_encrypt,
)
from .rc5_utils import pkcs7, random_iv, random_nonce_and_counter
from .rc5_words import word_for_bits

# Setup logger
logger = logging.getLogger("PythonCore")

SUPPORTED_MODES = ("ECB", "CBC", "CTR")


def _to_bytes(data, what):
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"{what} must be bytes or bytearray, got {type(data).__name__}")


class Cipher:
    """
    Byte-stream cipher over a control block.

    The cipher keeps no state besides the control block; chaining and
    counter state live only for the duration of a call.
    """

    def __init__(self, block):
        """
        Wrap a block cipher.

        Args:
            block: A BlockCipherBase instance, e.g. RC5ControlBlock
        """
        if not isinstance(block, BlockCipherBase):
            raise TypeError(f"Expected a BlockCipherBase, got {type(block).__name__}")
        self._block = block

    def control_block(self):
        return self._block

    def encrypt(self, plaintext, mode):
        """
        Encrypt plaintext bytes under the given operation mode.

        ECB and CBC pad the plaintext with PKCS#7 first; CTR encrypts the raw
        bytes and the output has the same length as the input.

        Args:
            plaintext: Data to encrypt
            mode: ECB(), CBC(iv) or CTR(nonce_and_counter)

        Returns:
            bytes: Ciphertext
        """
        block = self._block
        data = bytearray(_to_bytes(plaintext, "Plaintext"))

        if isinstance(mode, ECB):
            pkcs7(data, block.block_size(), pad=True)
            ct_blocks = ecb_encrypt(block, block.generate_blocks(bytes(data)))
            return block.generate_bytes_stream(ct_blocks)

        if isinstance(mode, CBC):
            iv = self._check_block(mode.iv, IVInvalidError(block.block_size()))
            pkcs7(data, block.block_size(), pad=True)
            ct_blocks = cbc_encrypt(block, iv, block.generate_blocks(bytes(data)))
            return block.generate_bytes_stream(ct_blocks)

        if isinstance(mode, CTR):
            counter = self._check_block(mode.nonce_and_counter, NonceInvalidError(block.word_size()))
            return ctr_encrypt(block, counter, bytes(data))

        raise TypeError(f"Unsupported operation mode: {mode!r}")

    def decrypt(self, ciphertext, mode):
        """
        Decrypt ciphertext bytes under the given operation mode.

        Args:
            ciphertext: Data to decrypt
            mode: The mode (and IV / counter block) used for encryption

        Returns:
            bytes: Plaintext
        """
        block = self._block
        data = _to_bytes(ciphertext, "Ciphertext")

        if isinstance(mode, CTR):
            counter = self._check_block(mode.nonce_and_counter, NonceInvalidError(block.word_size()))
            return ctr_decrypt(block, counter, data)

        if isinstance(mode, ECB):
            decrypt_blocks = ecb_decrypt
        elif isinstance(mode, CBC):
            iv = self._check_block(mode.iv, IVInvalidError(block.block_size()))

            def decrypt_blocks(control_block, blocks):
                return cbc_decrypt(control_block, iv, blocks)
        else:
            raise TypeError(f"Unsupported operation mode: {mode!r}")

        bs = block.block_size()
        # a ciphertext that cannot hold a padded message fails like bad padding
        if len(data) == 0 or len(data) % bs != 0:
            raise PaddingError()

        pt_blocks = decrypt_blocks(block, block.generate_blocks(data))
        pt_bytes = bytearray(block.generate_bytes_stream(pt_blocks))
        pkcs7(pt_bytes, bs, pad=False)
        return bytes(pt_bytes)

    def parse_iv_from_hex(self, iv_hex):
        """
        Parse an IV block from a hex string of exactly one block.

        Args:
            iv_hex: Hex-encoded IV

        Returns:
            tuple: IV block
        """
        iv_bytes = decode_hex(iv_hex)
        bs = self._block.block_size()
        if len(iv_bytes) != bs:
            raise IVInvalidError(bs)

        return self._block.generate_blocks(iv_bytes)[-1]

    def parse_nonce_counter_from_hex(self, nonce_hex, counter_hex):
        """
        Parse a CTR starting block from a nonce and a counter, one word each.

        Args:
            nonce_hex: Hex-encoded nonce
            counter_hex: Hex-encoded initial counter

        Returns:
            tuple: (nonce, counter) block
        """
        nonce_bytes = decode_hex(nonce_hex)
        counter_bytes = decode_hex(counter_hex)
        ws = self._block.word_size()

        if len(nonce_bytes) != ws or len(counter_bytes) != ws:
            raise NonceInvalidError(ws)

        return self._block.generate_blocks(nonce_bytes + counter_bytes)[-1]

    def _check_block(self, params, error):
        mask = self._block.word.MASK
        try:
            words = tuple(params)
        except TypeError:
            raise error from None

        if len(words) != BLOCK_WORDS:
            raise error
        for word in words:
            if isinstance(word, bool) or not isinstance(word, int) or not 0 <= word <= mask:
                raise error
        return words


def rc5_cipher(key, rounds, word_size=32):
    """
    Construct an RC5 cipher from a raw key and round count.

    Args:
        key: Raw key (1 to 255 bytes)
        rounds: Number of rounds (0 to 255)
        word_size: Word width in bits (16, 32, 64 or 128)

    Returns:
        Cipher: Cipher wrapping a new RC5ControlBlock
    """
    return Cipher(RC5ControlBlock(key, rounds, word_for_bits(word_size)))


# Dictionary to track implementations
RC5_IMPLEMENTATIONS = {}


def register_rc5_variant(name):
    """Register an RC5 implementation variant."""
    def decorator(impl_class):
        RC5_IMPLEMENTATIONS[name] = impl_class
        return impl_class
    return decorator


@register_rc5_variant("rc5")
class RC5Implementation:
    """RC5 implementation object used by the benchmark runner."""

    def __init__(self, word_size=32, rounds=12, key_size=128, mode="CBC", **kwargs):
        """
        Initialize with RC5 parameters.

        Args:
            word_size: Word width in bits (16, 32, 64 or 128)
            rounds: Number of rounds (0 to 255)
            key_size: Key size in bits
            mode: Mode of operation (ECB, CBC, CTR)
            **kwargs: Additional keyword arguments (ignored)
        """
        self.word = word_for_bits(word_size)
        self.word_size = self.word.BITS
        self.rounds = int(rounds)
        self.key_size = int(key_size)
        self.mode = str(mode).upper()

        if self.mode not in SUPPORTED_MODES:
            raise ValueError(f"Unsupported mode: {mode}. Must be one of {', '.join(SUPPORTED_MODES)}.")

        self.is_custom = True
        self.name = f"RC5-{self.mode}"
        self.description = (
            f"RC5-{self.word_size}/{self.rounds}/{format_key_size(self.key_size)} {self.mode}"
        )
        self.block_size = 2 * self.word.BYTES

        self.encryption_key = None
        self._ciphers = {}

        if kwargs:
            logger.debug(f"Ignoring unused RC5 settings: {sorted(kwargs)}")

    def generate_key(self):
        """
        Generate a key for RC5 encryption/decryption.

        Returns:
            bytes: The generated key
        """
        self.encryption_key = generate_key(self.key_size)
        return self.encryption_key

    def _cipher_for(self, key):
        key = bytes(key)
        cipher = self._ciphers.get(key)
        if cipher is None:
            cipher = Cipher(RC5ControlBlock(key, self.rounds, self.word))
            self._ciphers[key] = cipher
        return cipher

    def encrypt(self, data, key=None):
        """
        Encrypt data using RC5 in the configured mode.

        CBC output is prefixed with the IV and CTR output with the starting
        counter block.

        Args:
            data: Data to encrypt
            key: Key to use for encryption, or None to use the instance's key

        Returns:
            bytes: Encrypted data
        """
        if key is None:
            key = self.encryption_key

        if key is None:
            raise ValueError("Encryption key is required")

        cipher = self._cipher_for(key)
        block = cipher.control_block()

        if self.mode == "ECB":
            return cipher.encrypt(data, ECB())

        if self.mode == "CBC":
            iv = random_iv(self.word)
            return block.generate_bytes_stream([iv]) + cipher.encrypt(data, CBC(iv))

        nonce_and_counter = random_nonce_and_counter(self.word)
        return block.generate_bytes_stream([nonce_and_counter]) + cipher.encrypt(
            data, CTR(nonce_and_counter)
        )

    def decrypt(self, data, key=None):
        """
        Decrypt data produced by encrypt().

        Args:
            data: Data to decrypt
            key: Key to use for decryption, or None to use the instance's key

        Returns:
            bytes: Decrypted data
        """
        if key is None:
            key = self.encryption_key

        if key is None:
            raise ValueError("Decryption key is required")

        cipher = self._cipher_for(key)
        block = cipher.control_block()
        data = bytes(data)

        if self.mode == "ECB":
            return cipher.decrypt(data, ECB())

        if len(data) < self.block_size:
            raise ValueError(f"Data too short for {self.mode} mode")

        header = block.generate_blocks(data[:self.block_size])[0]
        body = data[self.block_size:]

        if self.mode == "CBC":
            return cipher.decrypt(body, CBC(header))
        return cipher.decrypt(body, CTR(header))
