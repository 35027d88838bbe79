import logging

import pytest

from src.main import build_parser, main


@pytest.fixture
def plaintext_file(tmp_path):
    path = tmp_path / "plain.txt"
    path.write_bytes(b"The quick brown fox jumps over the lazy dog\n" * 3)
    return path


def run_cli(*args):
    return main([str(arg) for arg in args])


@pytest.mark.parametrize("word_size", [16, 32, 64, 128])
def test_ecb_file_round_trip(tmp_path, plaintext_file, word_size):
    encrypted = tmp_path / "encrypted.bin"
    decrypted = tmp_path / "decrypted.txt"

    assert run_cli("-s", "secret", "-w", word_size, "-f", plaintext_file, "-d", encrypted, "-a", "encrypt", "ecb") == 0
    assert encrypted.read_bytes() != plaintext_file.read_bytes()

    assert run_cli("-s", "secret", "-w", word_size, "-f", encrypted, "-d", decrypted, "-a", "decrypt", "ecb") == 0
    assert decrypted.read_bytes() == plaintext_file.read_bytes()


def test_cbc_file_round_trip(tmp_path, plaintext_file):
    encrypted = tmp_path / "encrypted.bin"
    decrypted = tmp_path / "decrypted.txt"
    iv = "00112233445566778899aabbccddeeff"

    common = ["-s", "secret", "-r", 16, "-w", 64]
    assert run_cli(*common, "-f", plaintext_file, "-d", encrypted, "-a", "encrypt", "cbc", "--iv", iv) == 0
    assert run_cli(*common, "-f", encrypted, "-d", decrypted, "-a", "decrypt", "cbc", "--iv", iv) == 0
    assert decrypted.read_bytes() == plaintext_file.read_bytes()


def test_ctr_file_round_trip(tmp_path, plaintext_file):
    encrypted = tmp_path / "encrypted.bin"
    decrypted = tmp_path / "decrypted.txt"

    mode = ["ctr", "-n", "deadbeef", "-c", "00000001"]
    assert run_cli("-s", "secret", "-f", plaintext_file, "-d", encrypted, "-a", "encrypt", *mode) == 0
    assert len(encrypted.read_bytes()) == len(plaintext_file.read_bytes())

    assert run_cli("-s", "secret", "-f", encrypted, "-d", decrypted, "-a", "decrypt", *mode) == 0
    assert decrypted.read_bytes() == plaintext_file.read_bytes()


def test_generated_iv_is_logged(tmp_path, plaintext_file, caplog):
    encrypted = tmp_path / "encrypted.bin"
    with caplog.at_level(logging.INFO, logger="RC5Cli"):
        assert run_cli("-s", "secret", "-f", plaintext_file, "-d", encrypted, "cbc") == 0
    assert "Generated IV" in caplog.text


def test_decrypt_requires_iv(tmp_path, plaintext_file):
    assert run_cli("-s", "secret", "-f", plaintext_file, "-d", tmp_path / "out", "-a", "decrypt", "cbc") == 1


def test_decrypt_requires_nonce(tmp_path, plaintext_file):
    assert run_cli("-s", "secret", "-f", plaintext_file, "-d", tmp_path / "out", "-a", "decrypt", "ctr") == 1


def test_invalid_iv_length(tmp_path, plaintext_file):
    assert run_cli("-s", "secret", "-f", plaintext_file, "-d", tmp_path / "out", "cbc", "--iv", "0011") == 1


def test_invalid_rounds(tmp_path, plaintext_file):
    assert run_cli("-s", "secret", "-r", 300, "-f", plaintext_file, "-d", tmp_path / "out", "ecb") == 1


def test_bad_padding_exits_with_error(tmp_path):
    garbage = tmp_path / "garbage.bin"
    garbage.write_bytes(bytes(range(15)))
    assert run_cli("-s", "secret", "-f", garbage, "-d", tmp_path / "out", "-a", "decrypt", "ecb") == 1


def test_missing_input_file(tmp_path):
    assert run_cli("-s", "secret", "-f", tmp_path / "missing.txt", "-d", tmp_path / "out", "ecb") == 1


def test_parser_defaults():
    args = build_parser().parse_args(["-s", "k", "-f", "in.txt", "ecb"])
    assert args.word_size == 32
    assert args.rounds == 12
    assert args.dest == "./processed.txt"
    assert args.action == "encrypt"
    assert args.mode == "ecb"


def test_parser_rejects_unknown_word_size():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["-s", "k", "-w", "24", "-f", "in.txt", "ecb"])
