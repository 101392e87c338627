# Copyright 2025 Maida.AI
# SPDX-License-Identifier: Apache-2.0
"""Base-64 alphabet constants and registry."""

from ..constants import AlphabetID, AlphabetKind
from .base import Alphabet, Base64Alphabet

__all__ = [
    "Alphabet",
    "Base64Alphabet",
    "STANDARD",
    "MOD_CRYPT",
    "MOD_CRYPT_LE",
    "BCRYPT",
    "register_alphabet",
    "get_alphabet",
    "list_alphabets",
]

#: The standard RFC 4648 alphabet.
STANDARD = Base64Alphabet(kind=AlphabetKind.STANDARD, little_endian=False)

#: The modular crypt alphabet, used in various modular crypt password types.
MOD_CRYPT = Base64Alphabet(kind=AlphabetKind.MOD_CRYPT, little_endian=False)

#: The modular crypt alphabet with little-endian bit packing.
MOD_CRYPT_LE = Base64Alphabet(kind=AlphabetKind.MOD_CRYPT, little_endian=True)

#: The BCrypt alphabet.
BCRYPT = Base64Alphabet(kind=AlphabetKind.BCRYPT, little_endian=False)


# Alphabet registry
_ALPHABETS: dict[int, Base64Alphabet] = {}


def register_alphabet(alphabet_id: int, alphabet: Base64Alphabet) -> None:
    """Register an alphabet under an ID."""
    _ALPHABETS[alphabet_id] = alphabet


def get_alphabet(alphabet_id: int) -> Base64Alphabet:
    """Get an alphabet by ID."""
    if alphabet_id not in _ALPHABETS:
        raise ValueError(f"Unknown alphabet ID: {alphabet_id}")
    return _ALPHABETS[alphabet_id]


def list_alphabets() -> list[int]:
    """List all registered alphabet IDs."""
    return list(_ALPHABETS.keys())


# Register default alphabets
register_alphabet(AlphabetID.STANDARD, STANDARD)
register_alphabet(AlphabetID.MOD_CRYPT, MOD_CRYPT)
register_alphabet(AlphabetID.MOD_CRYPT_LE, MOD_CRYPT_LE)
register_alphabet(AlphabetID.BCRYPT, BCRYPT)
