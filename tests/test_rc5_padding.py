import pytest
from Crypto.Util.Padding import pad as crypto_pad
from cryptography.hazmat.primitives import padding as crypto_padding

from src.encryption.python.rc5 import PaddingError, pad_data, pkcs7, unpad_data


def test_aligned_buffer_gets_full_block():
    buf = bytearray(range(8))
    assert pkcs7(buf, 8) == 0
    assert buf == bytearray(range(8)) + bytearray([8] * 8)

    assert pkcs7(buf, 8, pad=False) == 8
    assert buf == bytearray(range(8))


def test_partial_block():
    buf = bytearray(b"hello")
    assert pkcs7(buf, 8) == 5
    assert buf == bytearray(b"hello\x03\x03\x03")

    assert pkcs7(buf, 8, pad=False) == 3
    assert buf == bytearray(b"hello")


def test_empty_buffer_pads_to_one_block():
    assert pad_data(b"", 8) == bytes([8] * 8)
    assert unpad_data(bytes([8] * 8), 8) == b""


@pytest.mark.parametrize("padded", [
    b"",
    b"\x01\x02\x03",
    b"abcdefg\x00",
    b"abcdefg\x09",
    b"abcde\x02\x03\x03",
    b"abcdefgh" + b"\x01" * 7 + b"\x08",
])
def test_invalid_padding_rejected(padded):
    with pytest.raises(PaddingError) as exc_info:
        unpad_data(padded, 8)
    assert exc_info.value.message == "Invalid PKCS7 padding scheme"


def test_padding_errors_are_indistinguishable():
    messages = set()
    for padded in (b"", b"abc", b"abcdefg\x00", b"abcdefg\x09", b"abcde\x02\x03\x03"):
        with pytest.raises(PaddingError) as exc_info:
            unpad_data(padded, 8)
        messages.add(str(exc_info.value))
    assert len(messages) == 1


def test_buffer_must_be_bytearray():
    with pytest.raises(TypeError):
        pkcs7(b"immutable", 8)


@pytest.mark.parametrize("block_size", [0, 256])
def test_block_size_bounds(block_size):
    with pytest.raises(ValueError):
        pkcs7(bytearray(b"data"), block_size)


@pytest.mark.parametrize("block_size", [4, 8, 16, 32])
@pytest.mark.parametrize("length", [0, 1, 3, 4, 15, 16, 33])
def test_matches_pycryptodome(block_size, length):
    data = bytes(range(length))
    assert pad_data(data, block_size) == crypto_pad(data, block_size, style="pkcs7")


@pytest.mark.parametrize("block_size", [8, 16, 32])
@pytest.mark.parametrize("length", [0, 5, 8, 31])
def test_matches_cryptography(block_size, length):
    data = bytes(range(length))
    padder = crypto_padding.PKCS7(block_size * 8).padder()
    expected = padder.update(data) + padder.finalize()
    assert pad_data(data, block_size) == expected

    unpadder = crypto_padding.PKCS7(block_size * 8).unpadder()
    assert unpad_data(expected, block_size) == unpadder.update(expected) + unpadder.finalize()
