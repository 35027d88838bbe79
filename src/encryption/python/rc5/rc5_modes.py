#!/usr/bin/env python3
"""
RC5 Modes
Operation modes (ECB, CBC, CTR) composed over a control block's single-block transform.

ECB and CBC work on lists of word blocks and need block-aligned (padded)
input. CTR turns the block cipher into a stream cipher and works on raw
bytes of any length.
"""

from Crypto.Util.strxor import strxor

from .rc5_utils import xor_blocks


class OperationMode:
    """Base class of the three operation mode variants."""

    name = None

    def __repr__(self):
        return f"{type(self).__name__}()"

    def __eq__(self, other):
        return type(self) is type(other) and vars(self) == vars(other)

    def __hash__(self):
        return hash((type(self), tuple(sorted(vars(self).items()))))


class ECB(OperationMode):
    """
    Electronic-Code-Book mode.

    Identical plaintext blocks produce identical ciphertext blocks, so ECB
    leaks the structure of the message. Do not use it for anything that
    needs confidentiality.
    """

    name = "ECB"


class CBC(OperationMode):
    """Cipher-Block-Chaining mode, seeded by an IV block."""

    name = "CBC"

    def __init__(self, iv):
        self.iv = tuple(iv)

    def __repr__(self):
        return f"CBC(iv={self.iv!r})"


class CTR(OperationMode):
    """Counter mode; the last word of the block is the counter, the rest the nonce."""

    name = "CTR"

    def __init__(self, nonce_and_counter):
        self.nonce_and_counter = tuple(nonce_and_counter)

    def __repr__(self):
        return f"CTR(nonce_and_counter={self.nonce_and_counter!r})"


# ECB mode
def ecb_encrypt(control_block, input_blocks):

    return [control_block.encrypt_block(block) for block in input_blocks]


def ecb_decrypt(control_block, input_blocks):

    return [control_block.decrypt_block(block) for block in input_blocks]


# CBC mode
def cbc_encrypt(control_block, iv, input_blocks):
    """
    Encrypt blocks in CBC mode.

    Args:
        control_block: Block cipher instance
        iv: Initialization vector block
        input_blocks: Plaintext blocks

    Returns:
        list: Ciphertext blocks
    """
    previous_block = tuple(iv)
    output = []

    for block in input_blocks:
        # XOR with previous ciphertext block (or IV) then encrypt
        previous_block = control_block.encrypt_block(xor_blocks(previous_block, block))
        output.append(previous_block)

    return output


def cbc_decrypt(control_block, iv, input_blocks):
    """
    Decrypt blocks in CBC mode.

    Args:
        control_block: Block cipher instance
        iv: Initialization vector block used for encryption
        input_blocks: Ciphertext blocks

    Returns:
        list: Plaintext blocks
    """
    previous_block = tuple(iv)
    output = []

    for block in input_blocks:
        decrypted_block = control_block.decrypt_block(block)
        output.append(xor_blocks(decrypted_block, previous_block))
        # chain on the ciphertext block, not the recovered plaintext
        previous_block = block

    return output


# CTR mode
def ctr_encrypt(control_block, nonce_and_counter, input_stream):
    """
    Encrypt a byte stream of any length in CTR mode.

    Args:
        control_block: Block cipher instance
        nonce_and_counter: Initial counter block
        input_stream: Plaintext bytes

    Returns:
        bytes: Ciphertext of the same length as the input
    """
    word = control_block.word
    bs = control_block.block_size()
    counter_block = list(nonce_and_counter)
    output = bytearray()

    for offset in range(0, len(input_stream), bs):
        chunk = bytes(input_stream[offset:offset + bs])
        key_stream = control_block.generate_bytes_stream(
            [control_block.encrypt_block(tuple(counter_block))]
        )
        output += strxor(chunk, key_stream[:len(chunk)])

        # only the counter word moves; the nonce words stay fixed
        counter_block[-1] = word.wrapping_add(counter_block[-1], word.from_u8(1))

    return bytes(output)


def ctr_decrypt(control_block, nonce_and_counter, input_stream):

    # CTR decryption repeats the encryption with the same counter block
    return ctr_encrypt(control_block, nonce_and_counter, input_stream)
