#!/usr/bin/env python3
"""
RC5 Encryption Implementation
A parametric implementation of the RC5 block cipher over 16, 32, 64 and 128-bit
words with ECB, CBC and CTR modes and PKCS#7 padding.
"""

from .base import BLOCK_WORDS, BlockCipherBase
from .implementation import (
    RC5_IMPLEMENTATIONS,
    SUPPORTED_MODES,
    Cipher,
    RC5Implementation,
    rc5_cipher,
)
from .key_utils import generate_key
from .rc5_core import RC5ControlBlock, Version
from .rc5_errors import (
    InvalidKeyError,
    InvalidRoundsError,
    IVInvalidError,
    KeyTooLongError,
    NonceInvalidError,
    PaddingError,
    ParseHexError,
    RC5Error,
    WordSizeError,
)
from .rc5_key_schedule import MAX_KEY_BYTES, MAX_ROUNDS, RC5Key, expand_key
from .rc5_modes import CBC, CTR, ECB, OperationMode
from .rc5_utils import pad_data, pkcs7, random_iv, random_nonce_and_counter, unpad_data
from .rc5_words import (
    SUPPORTED_WORD_SIZES,
    Word,
    Word16,
    Word32,
    Word64,
    Word128,
    word_for_bits,
)

__all__ = [
    'BLOCK_WORDS',
    'BlockCipherBase',
    'Cipher',
    'RC5ControlBlock',
    'RC5Implementation',
    'RC5Key',
    'Version',
    'OperationMode',
    'ECB',
    'CBC',
    'CTR',
    'Word',
    'Word16',
    'Word32',
    'Word64',
    'Word128',
    'SUPPORTED_WORD_SIZES',
    'SUPPORTED_MODES',
    'MAX_KEY_BYTES',
    'MAX_ROUNDS',
    'RC5Error',
    'WordSizeError',
    'PaddingError',
    'KeyTooLongError',
    'InvalidKeyError',
    'InvalidRoundsError',
    'ParseHexError',
    'IVInvalidError',
    'NonceInvalidError',
    'expand_key',
    'generate_key',
    'pkcs7',
    'pad_data',
    'unpad_data',
    'random_iv',
    'random_nonce_and_counter',
    'rc5_cipher',
    'word_for_bits',
    'get_rc5_implementation',
    'register_rc5_implementations',
]


def get_rc5_implementation(word_size=32, rounds=12, key_size=128, mode="CBC", **kwargs):
    """
    Get an RC5 implementation with specified parameters.

    Args:
        word_size: Word width in bits (16, 32, 64 or 128)
        rounds: Number of rounds
        key_size: Key size in bits
        mode: Mode of operation (ECB, CBC, CTR)
        **kwargs: Additional arguments

    Returns:
        RC5Implementation: Configured RC5 implementation
    """
    return RC5Implementation(
        word_size=word_size,
        rounds=rounds,
        key_size=key_size,
        mode=mode,
        **kwargs
    )


def register_rc5_implementations():
    """
    Register all RC5 variants with the benchmarking system.

    Returns:
        dict: Implementation name -> factory, one per word size and mode
              (e.g. "rc5_32_cbc") plus the generic "rc5"
    """
    implementations = dict(RC5_IMPLEMENTATIONS)

    for word_size in SUPPORTED_WORD_SIZES:
        for mode in SUPPORTED_MODES:
            name = f"rc5_{word_size}_{mode.lower()}"
            implementations[name] = lambda ws=word_size, m=mode, **kwargs: RC5Implementation(
                word_size=ws,
                mode=m,
                **{k: v for k, v in kwargs.items() if k not in ['word_size', 'mode']}
            )

    return implementations
