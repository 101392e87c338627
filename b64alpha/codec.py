# Copyright 2025 Maida.AI
# SPDX-License-Identifier: Apache-2.0
"""Byte/character base-64 codec driven by a Base64Alphabet."""

import logging

from .alphabets import STANDARD, Base64Alphabet
from .constants import BITS_PER_CHAR, GROUP_BYTES, GROUP_CHARS, INVALID, PAD_CHAR, VALUE_MASK

# ----------------------------------------------------------------------------
# Group packing
# ----------------------------------------------------------------------------


def _pack_group(chunk: bytes, little_endian: bool) -> list[int]:
    """Split up to three bytes into ``len(chunk) + 1`` 6-bit values."""
    nchars = len(chunk) + 1
    if little_endian:
        # first byte lands in the low bits of the first value
        n = int.from_bytes(chunk, "little")
        return [(n >> (BITS_PER_CHAR * i)) & VALUE_MASK for i in range(nchars)]

    # zero-fill the missing bytes so the first byte stays in the top bits
    n = int.from_bytes(chunk.ljust(GROUP_BYTES, b"\x00"), "big")
    return [(n >> (BITS_PER_CHAR * (GROUP_CHARS - 1 - i))) & VALUE_MASK for i in range(nchars)]


def _unpack_group(values: list[int], little_endian: bool) -> bytes:
    """Join two to four 6-bit values into ``len(values) - 1`` bytes."""
    nbytes = len(values) - 1
    n = 0
    if little_endian:
        for i, val in enumerate(values):
            n |= val << (BITS_PER_CHAR * i)
        return (n & ((1 << (8 * nbytes)) - 1)).to_bytes(nbytes, "little")

    for i, val in enumerate(values):
        n |= val << (BITS_PER_CHAR * (GROUP_CHARS - 1 - i))
    return n.to_bytes(GROUP_BYTES, "big")[:nbytes]


# ----------------------------------------------------------------------------
# Encoding/decoding
# ----------------------------------------------------------------------------


def base64_encode(data: bytes, alphabet: Base64Alphabet = STANDARD, pad: bool = False) -> str:
    """Encode bytes to base-64 text.

    Args:
        data: Bytes to encode
        alphabet: Alphabet supplying characters and bit-packing order
        pad: Whether to pad the output with ``=`` to a multiple of four characters

    Returns:
        Encoded text
    """
    out: list[str] = []
    for offset in range(0, len(data), GROUP_BYTES):
        chunk = bytes(data[offset : offset + GROUP_BYTES])
        out.extend(alphabet.encode_char(val) for val in _pack_group(chunk, alphabet.little_endian))

    if pad and len(out) % GROUP_CHARS:
        out.append(PAD_CHAR * (GROUP_CHARS - len(out) % GROUP_CHARS))
    return "".join(out)


def base64_decode(text: str, alphabet: Base64Alphabet = STANDARD) -> bytes:
    """Decode base-64 text to bytes.

    Args:
        text: Encoded text, optionally ``=`` padded
        alphabet: Alphabet the text was encoded with

    Returns:
        Decoded bytes

    Raises:
        ValueError: If the text contains a character outside the alphabet or has an impossible length
    """
    body = text.rstrip(PAD_CHAR)
    npad = len(text) - len(body)
    if npad:
        if npad > 2 or len(text) % GROUP_CHARS:
            logging.debug("Rejecting base-64 input with %d padding characters over %d", npad, len(text))
            raise ValueError("Invalid base-64 padding")

    if len(body) % GROUP_CHARS == 1:
        logging.debug("Rejecting base-64 input of length %d", len(body))
        raise ValueError(f"Invalid base-64 length: {len(body)}")

    values: list[int] = []
    for index, char in enumerate(body):
        val = alphabet.decode(char)
        if val == INVALID:
            logging.debug("Rejecting base-64 input: %r at offset %d", char, index)
            raise ValueError(f"Invalid base-64 character {char!r} at offset {index}")
        values.append(val)

    out = bytearray()
    for offset in range(0, len(values), GROUP_CHARS):
        out.extend(_unpack_group(values[offset : offset + GROUP_CHARS], alphabet.little_endian))
    return bytes(out)
