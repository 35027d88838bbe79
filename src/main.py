#!/usr/bin/env python3
"""
RC5 Bench - Command Line Entry Point
Encrypts or decrypts a file with RC5 in ECB, CBC or CTR mode.
"""

import sys
import argparse
import logging
from pathlib import Path

# Add the project root to the Python path
if str(Path(__file__).parent.parent) not in sys.path:
    sys.path.insert(0, str(Path(__file__).parent.parent))

# Import after path adjustment
from src.encryption.python.rc5 import (
    CBC,
    CTR,
    ECB,
    SUPPORTED_WORD_SIZES,
    random_iv,
    random_nonce_and_counter,
    rc5_cipher,
)

logger = logging.getLogger("RC5Cli")


def setup_logging(verbose=False):
    """Attach the console handler once."""
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="rc5-cli",
        description="Encrypt or decrypt a file with the RC5 block cipher"
    )
    parser.add_argument("-s", "--secret", required=True, help="Secret key (UTF-8 text, 1-255 bytes)")
    parser.add_argument("-r", "--rounds", type=int, default=12, help="Number of rounds (0-255)")
    parser.add_argument("-w", "--word-size", type=int, default=32, choices=SUPPORTED_WORD_SIZES,
                        help="Word size in bits")
    parser.add_argument("-f", "--file", required=True, help="Input file")
    parser.add_argument("-d", "--dest", default="./processed.txt", help="Output file")
    parser.add_argument("-a", "--action", choices=["encrypt", "decrypt"], default="encrypt",
                        help="Operation to perform")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    modes = parser.add_subparsers(dest="mode", required=True, metavar="MODE")
    modes.add_parser("ecb", help="Electronic codebook mode")

    cbc = modes.add_parser("cbc", help="Cipher block chaining mode")
    cbc.add_argument("--iv", help="IV as hex, one block long (generated on encrypt if omitted)")

    ctr = modes.add_parser("ctr", help="Counter mode")
    ctr.add_argument("-n", "--nonce", help="Nonce as hex, one word long")
    ctr.add_argument("-c", "--counter", help="Initial counter as hex, one word long")

    return parser


def block_to_hex(cipher, block):
    word = cipher.control_block().word
    return [word.to_bytes(w).hex() for w in block]


def resolve_mode(args, cipher):
    """
    Build the operation mode from the parsed arguments.

    Missing IV or nonce/counter values are generated when encrypting and
    logged so the output can be decrypted later.
    """
    word = cipher.control_block().word
    encrypting = args.action == "encrypt"

    if args.mode == "ecb":
        return ECB()

    if args.mode == "cbc":
        if args.iv is not None:
            return CBC(cipher.parse_iv_from_hex(args.iv))
        if not encrypting:
            raise ValueError("--iv is required to decrypt in CBC mode")

        iv = random_iv(word)
        logger.info(f"Generated IV: {''.join(block_to_hex(cipher, iv))}")
        return CBC(iv)

    if args.nonce is not None or args.counter is not None:
        return CTR(cipher.parse_nonce_counter_from_hex(args.nonce or "", args.counter or ""))
    if not encrypting:
        raise ValueError("--nonce and --counter are required to decrypt in CTR mode")

    nonce_and_counter = random_nonce_and_counter(word)
    nonce_hex, counter_hex = block_to_hex(cipher, nonce_and_counter)
    logger.info(f"Generated nonce: {nonce_hex} counter: {counter_hex}")
    return CTR(nonce_and_counter)


def run(args):
    cipher = rc5_cipher(args.secret, args.rounds, args.word_size)
    logger.debug(f"Using {cipher.control_block().control_block_version()}")

    mode = resolve_mode(args, cipher)

    data = Path(args.file).read_bytes()
    if args.action == "encrypt":
        output = cipher.encrypt(data, mode)
    else:
        output = cipher.decrypt(data, mode)

    Path(args.dest).write_bytes(output)
    logger.info(f"{args.action.capitalize()}ed {len(data)} bytes from {args.file} into {args.dest}")


def main(argv=None):
    """Main entry point for the command line tool"""
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        run(args)
    # RC5Error subclasses ValueError
    except (ValueError, OSError) as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
