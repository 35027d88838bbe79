import pytest

from src.encryption.python.rc5 import (
    MAX_KEY_BYTES,
    InvalidKeyError,
    InvalidRoundsError,
    KeyTooLongError,
    RC5Error,
    RC5Key,
    Word16,
    Word32,
    Word64,
    Word128,
    expand_key,
)


@pytest.mark.parametrize("word", [Word16, Word32, Word64, Word128])
@pytest.mark.parametrize("rounds", [0, 1, 12, 20])
def test_s_table_size(word, rounds):
    key = RC5Key(b"secret key", rounds, word)
    assert len(key.s_table) == 2 * (rounds + 1)
    assert all(0 <= s <= word.MASK for s in key.s_table)


def test_key_schedule_is_deterministic():
    first = RC5Key(bytes(range(16)), 12, Word32)
    second = RC5Key(bytes(range(16)), 12, Word32)
    assert first.s_table == second.s_table
    assert RC5Key(bytes(range(1, 17)), 12, Word32).s_table != first.s_table


def test_str_and_bytes_keys_match():
    assert RC5Key("key", 12).s_table == RC5Key(b"key", 12).s_table
    assert RC5Key(bytearray(b"key"), 12).s_table == RC5Key(memoryview(b"key"), 12).s_table


def test_raw_key():
    key = RC5Key(b"abc", 8)
    assert key.raw_key == b"abc"
    assert key.raw_len() == 3
    assert key.word is Word32


def test_empty_key_rejected():
    with pytest.raises(InvalidKeyError):
        RC5Key(b"", 12)


def test_key_too_long():
    RC5Key(bytes(MAX_KEY_BYTES), 12)
    with pytest.raises(KeyTooLongError) as exc_info:
        RC5Key(bytes(MAX_KEY_BYTES + 1), 12)
    assert exc_info.value.current == 256
    assert exc_info.value.supported == 255


@pytest.mark.parametrize("rounds", [-1, 256, 1000])
def test_rounds_out_of_bounds(rounds):
    with pytest.raises(InvalidRoundsError) as exc_info:
        RC5Key(b"key", rounds)
    assert exc_info.value.rounds == rounds


def test_rounds_boundaries():
    RC5Key(b"key", 0)
    RC5Key(b"key", 255)


@pytest.mark.parametrize("rounds", ["12", 12.0, True])
def test_rounds_must_be_int(rounds):
    with pytest.raises(TypeError):
        RC5Key(b"key", rounds)


def test_key_type_checked():
    with pytest.raises(TypeError):
        RC5Key(12345, 12)


def test_errors_are_value_errors():
    with pytest.raises(ValueError) as exc_info:
        RC5Key(b"", 12)
    assert isinstance(exc_info.value, RC5Error)
    assert str(exc_info.value).startswith("[RC5-Error]")



def test_expand_key_matches_rc5_key():
    assert tuple(expand_key(b"key", 12, Word64)) == RC5Key(b"key", 12, Word64).s_table
