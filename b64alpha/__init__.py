# Copyright 2025 Maida.AI
# SPDX-License-Identifier: Apache-2.0
r"""b64alpha - Pluggable base-64 alphabets.

This package provides the alphabet layer a base-64 codec plugs in to vary its
output format without duplicating the bit-packing logic.

The implementation provides:
- Base64Alphabet, a frozen mapping between 6-bit values and code points
- STANDARD (RFC 4648), MOD_CRYPT, MOD_CRYPT_LE and BCRYPT alphabets
- An ID-keyed alphabet registry
- base64_encode/base64_decode honoring each alphabet's bit-packing order
"""

# Import public API from modules
from .alphabets import (
    BCRYPT,
    MOD_CRYPT,
    MOD_CRYPT_LE,
    STANDARD,
    Alphabet,
    Base64Alphabet,
    get_alphabet,
    list_alphabets,
    register_alphabet,
)
from .codec import base64_decode, base64_encode
from .constants import (
    INVALID,
    PAD_CHAR,
    AlphabetID,
    AlphabetKind,
)

# Public API exports
__all__ = [
    # Core classes
    "Alphabet",
    "Base64Alphabet",
    # Alphabets
    "STANDARD",
    "MOD_CRYPT",
    "MOD_CRYPT_LE",
    "BCRYPT",
    # Constants and enums
    "INVALID",
    "PAD_CHAR",
    "AlphabetID",
    "AlphabetKind",
    # Registry
    "get_alphabet",
    "list_alphabets",
    "register_alphabet",
    # Codec
    "base64_encode",
    "base64_decode",
]
