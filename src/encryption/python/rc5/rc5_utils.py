import hmac
import secrets

from .base import BLOCK_WORDS
from .rc5_errors import PaddingError


def _check_block_size(block_size):
    if not 0 < block_size <= 255:
        raise ValueError(f"PKCS#7 block size must be within 1-255 bytes, got {block_size}")


# apply or remove PKCS#7 padding in place
def pkcs7(buf, block_size, pad=True):
    """
    Apply or remove PKCS#7 padding on a bytearray in place.

    An already aligned buffer still receives a full block of padding.

    Args:
        buf: bytearray to modify
        block_size: Block size in bytes (1-255)
        pad: True to pad, False to unpad

    Returns:
        int: When padding, len(buf) % block_size before padding. When
             unpadding, the number of bytes removed.
    """
    if not isinstance(buf, bytearray):
        raise TypeError("Buffer must be a bytearray")
    _check_block_size(block_size)

    if pad:
        rem = len(buf) % block_size
        pad_count = block_size - rem if rem > 0 else block_size
        buf.extend(bytes([pad_count]) * pad_count)
        return rem

    # the same error for every failure, so the caller learns nothing
    # about which check rejected the buffer
    length = len(buf)
    if length == 0 or length % block_size != 0:
        raise PaddingError()

    pad_len = buf[-1]
    if pad_len == 0 or pad_len > block_size:
        raise PaddingError()

    if not hmac.compare_digest(bytes(buf[length - pad_len:]), bytes([pad_len]) * pad_len):
        raise PaddingError()

    del buf[length - pad_len:]
    return pad_len


def pad_data(data, block_size):

    if not isinstance(data, (bytes, bytearray)):
        raise TypeError("Data must be bytes or bytearray")

    buf = bytearray(data)
    pkcs7(buf, block_size, pad=True)
    return bytes(buf)


def unpad_data(padded_data, block_size):

    if not isinstance(padded_data, (bytes, bytearray)):
        raise TypeError("Data must be bytes or bytearray")

    buf = bytearray(padded_data)
    pkcs7(buf, block_size, pad=False)
    return bytes(buf)


def xor_blocks(a, b):

    return tuple(x ^ y for x, y in zip(a, b))


def random_iv(word, rng=None):
    """
    Generate a pseudo-random IV block.

    Args:
        word: Word class of the cipher
        rng: Optional generator with getrandbits; a fresh
             secrets.SystemRandom() is used when omitted

    Returns:
        tuple: BLOCK_WORDS random words
    """
    rng = rng or secrets.SystemRandom()
    return tuple(word.random(rng) for _ in range(BLOCK_WORDS))


def random_nonce_and_counter(word, rng=None):
    """
    Generate a CTR starting block: random nonce words followed by a zero counter.

    Args:
        word: Word class of the cipher
        rng: Optional generator with getrandbits

    Returns:
        tuple: (nonce words..., 0)
    """
    rng = rng or secrets.SystemRandom()
    nonce = tuple(word.random(rng) for _ in range(BLOCK_WORDS - 1))
    return nonce + (word.ZERO,)
