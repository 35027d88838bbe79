#!/usr/bin/env python3
"""
RC5 Errors
Exceptions raised by the RC5 cipher during construction and cipher operations.

Every error derives from RC5Error, which is itself a ValueError so callers
that only expect ValueError keep working.
"""

ERROR_PREFIX = "[RC5-Error]"


class RC5Error(ValueError):
    """Base class for all RC5 failures."""

    def __init__(self, message):
        self.message = message
        super().__init__(f"{ERROR_PREFIX} {message}")


class WordSizeError(RC5Error):
    """Raised when a byte slice or width does not match the word size."""

    def __init__(self, message="Word size mis-match"):
        super().__init__(message)


class PaddingError(RC5Error):
    """
    Raised for every PKCS#7 validation failure.

    The message never changes so that callers cannot tell which check
    rejected the buffer.
    """

    def __init__(self):
        super().__init__("Invalid PKCS7 padding scheme")


class KeyTooLongError(RC5Error):
    """Raised when the raw key exceeds the supported length."""

    def __init__(self, current, supported):
        self.current = current
        self.supported = supported
        super().__init__(
            f"RC5 key is too long, supported: {supported} max, current: {current}"
        )


class InvalidKeyError(RC5Error):
    """Raised when the raw key is empty."""

    def __init__(self):
        super().__init__("Invalid RC5-key, received an empty key")


class InvalidRoundsError(RC5Error):
    """Raised when the round count is outside 0-255."""

    def __init__(self, rounds):
        self.rounds = rounds
        super().__init__(f"Rounds out-of-bounds, must be within 0-255, current {rounds}")


class ParseHexError(RC5Error):
    """Raised when a hex string cannot be decoded."""

    def __init__(self, detail):
        self.detail = detail
        super().__init__(f"Unable to parse Hex-String {detail}")


class IVInvalidError(RC5Error):
    """Raised when an IV does not have exactly one block worth of bytes."""

    def __init__(self, expected_len):
        self.expected_len = expected_len
        super().__init__(f"IV hex string should be equal to block size {expected_len} bytes")


class NonceInvalidError(RC5Error):
    """Raised when a nonce or counter does not have exactly one word worth of bytes."""

    def __init__(self, expected_len):
        self.expected_len = expected_len
        super().__init__(
            f"Nonce/Counter hex string should be equal to word-size {expected_len} bytes"
        )
