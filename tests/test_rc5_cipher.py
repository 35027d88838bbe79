import random

import pytest

from src.encryption.python.rc5 import (
    CBC,
    CTR,
    ECB,
    Cipher,
    IVInvalidError,
    NonceInvalidError,
    PaddingError,
    ParseHexError,
    RC5ControlBlock,
    random_iv,
    random_nonce_and_counter,
    rc5_cipher,
)


MESSAGE_LENGTHS = [0, 1, 7, 8, 15, 16, 17, 100, 257]


def make_mode(name, word, rng):
    if name == "ECB":
        return ECB()
    if name == "CBC":
        return CBC(random_iv(word, rng))
    return CTR(random_nonce_and_counter(word, rng))


@pytest.mark.parametrize("word_size", [16, 32, 64, 128])
@pytest.mark.parametrize("rounds", [0, 12, 20])
@pytest.mark.parametrize("mode_name", ["ECB", "CBC", "CTR"])
def test_round_trip(word_size, rounds, mode_name):
    rng = random.Random(word_size * 1000 + rounds)
    cipher = rc5_cipher(b"round trip key", rounds, word_size)
    mode = make_mode(mode_name, cipher.control_block().word, rng)
    bs = cipher.control_block().block_size()

    for length in MESSAGE_LENGTHS:
        message = rng.randbytes(length)
        ciphertext = cipher.encrypt(message, mode)

        if mode_name == "CTR":
            assert len(ciphertext) == length
        else:
            # always at least one byte of padding
            assert len(ciphertext) % bs == 0
            assert len(ciphertext) > length

        assert cipher.decrypt(ciphertext, mode) == message


def test_empty_message_pads_to_one_block():
    cipher = rc5_cipher(b"key", 12)
    ciphertext = cipher.encrypt(b"", ECB())
    assert len(ciphertext) == 8
    assert cipher.decrypt(ciphertext, ECB()) == b""


def test_ciphertext_is_deterministic():
    mode = CBC((1, 2))
    first = rc5_cipher(b"key", 12).encrypt(b"same message", mode)
    second = rc5_cipher(b"key", 12).encrypt(b"same message", mode)
    assert first == second


def test_cbc_iv_changes_ciphertext():
    cipher = rc5_cipher(b"key", 12)
    assert cipher.encrypt(b"message", CBC((1, 2))) != cipher.encrypt(b"message", CBC((2, 1)))


def test_wrong_key_fails_or_garbles():
    ciphertext = rc5_cipher(b"right key", 12).encrypt(b"attack at dawn", ECB())
    try:
        assert rc5_cipher(b"wrong key", 12).decrypt(ciphertext, ECB()) != b"attack at dawn"
    except PaddingError:
        pass


@pytest.mark.parametrize("ciphertext", [b"", bytes(7), bytes(9)])
@pytest.mark.parametrize("mode", [ECB(), CBC((0, 0))])
def test_misaligned_ciphertext(ciphertext, mode):
    with pytest.raises(PaddingError):
        rc5_cipher(b"key", 12).decrypt(ciphertext, mode)


def test_invalid_mode_parameters():
    cipher = rc5_cipher(b"key", 12)
    with pytest.raises(IVInvalidError):
        cipher.encrypt(b"data", CBC((1,)))
    with pytest.raises(IVInvalidError):
        cipher.encrypt(b"data", CBC((1, 1 << 32)))
    with pytest.raises(NonceInvalidError):
        cipher.encrypt(b"data", CTR((1, 2, 3)))


def test_unsupported_mode():
    with pytest.raises(TypeError):
        rc5_cipher(b"key", 12).encrypt(b"data", "ECB")


def test_cipher_requires_block_cipher():
    with pytest.raises(TypeError):
        Cipher(object())


def test_control_block_is_shared():
    block = RC5ControlBlock(b"key", 12)
    assert Cipher(block).control_block() is block


def test_parse_iv_from_hex():
    cipher = rc5_cipher(b"key", 12)
    assert cipher.parse_iv_from_hex("0100000002000000") == (1, 2)
    assert cipher.parse_iv_from_hex(b"FFFFFFFF00000000") == (0xFFFFFFFF, 0)


@pytest.mark.parametrize("iv_hex", ["", "01", "010000000200000003", "0100000002000000FF"])
def test_parse_iv_wrong_length(iv_hex):
    with pytest.raises(IVInvalidError) as exc_info:
        rc5_cipher(b"key", 12).parse_iv_from_hex(iv_hex)
    assert exc_info.value.expected_len == 8


@pytest.mark.parametrize("iv_hex", ["zz00000002000000", "0100000002000", "é1000000"])
def test_parse_iv_bad_hex(iv_hex):
    with pytest.raises(ParseHexError):
        rc5_cipher(b"key", 12).parse_iv_from_hex(iv_hex)


def test_parse_nonce_counter_from_hex():
    cipher = rc5_cipher(b"key", 12, word_size=64)
    block = cipher.parse_nonce_counter_from_hex("0100000000000000", "0200000000000000")
    assert block == (1, 2)


@pytest.mark.parametrize("nonce_hex, counter_hex", [
    ("01000000", "0200"),
    ("0100", "02000000"),
    ("0100", "0200"),
    ("", ""),
])
def test_parse_nonce_counter_wrong_length(nonce_hex, counter_hex):
    with pytest.raises(NonceInvalidError) as exc_info:
        rc5_cipher(b"key", 12).parse_nonce_counter_from_hex(nonce_hex, counter_hex)
    assert exc_info.value.expected_len == 4


def test_parsed_parameters_round_trip():
    cipher = rc5_cipher(b"key", 12)
    mode = CTR(cipher.parse_nonce_counter_from_hex("deadbeef", "00000000"))
    assert cipher.decrypt(cipher.encrypt(b"counter mode", mode), mode) == b"counter mode"


def test_random_parameters_use_injected_generator():
    word = rc5_cipher(b"key", 12).control_block().word
    assert random_iv(word, random.Random(1)) == random_iv(word, random.Random(1))
    nonce_and_counter = random_nonce_and_counter(word, random.Random(1))
    assert len(nonce_and_counter) == 2
    assert nonce_and_counter[-1] == 0
