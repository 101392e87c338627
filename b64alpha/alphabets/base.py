# Copyright 2025 Maida.AI
# SPDX-License-Identifier: Apache-2.0
"""Base alphabet models."""

from collections.abc import Callable

from pydantic import BaseModel, ConfigDict, Field

from ..constants import INVALID, AlphabetKind
from . import bcrypt, mod_crypt, standard

# Encode/decode function pairs, one per character ordering
_ENCODERS: dict[AlphabetKind, Callable[[int], int]] = {
    AlphabetKind.STANDARD: standard.encode,
    AlphabetKind.MOD_CRYPT: mod_crypt.encode,
    AlphabetKind.BCRYPT: bcrypt.encode,
}
_DECODERS: dict[AlphabetKind, Callable[[int], int]] = {
    AlphabetKind.STANDARD: standard.decode,
    AlphabetKind.MOD_CRYPT: mod_crypt.decode,
    AlphabetKind.BCRYPT: bcrypt.decode,
}

# Characters in value order, built once per ordering
_CHARSETS: dict[AlphabetKind, str] = {
    kind: "".join(chr(encode(val)) for val in range(64)) for kind, encode in _ENCODERS.items()
}


class Alphabet(BaseModel):
    """Common alphabet attributes.

    ``little_endian`` tells the consuming codec which end of a byte group is
    packed into the first digit. It is metadata only; the character mapping
    does not depend on it.
    """

    model_config = ConfigDict(frozen=True)

    little_endian: bool = Field(False, description="Pack least significant bits first")


class Base64Alphabet(Alphabet):
    """A mapping between 6-bit values and Unicode code points."""

    kind: AlphabetKind = Field(..., description="Character ordering")

    def encode(self, val: int) -> int:
        """Encode a 6-bit value to a code point.

        Args:
            val: Value in ``0..63``; callers mask or range-check upstream

        Returns:
            Unicode code point
        """
        return _ENCODERS[self.kind](val)

    def decode(self, code_point: int | str) -> int:
        """Decode a code point to its 6-bit value.

        Args:
            code_point: Code point, or a one-character string

        Returns:
            Value in ``0..63``, or INVALID if the code point is not in the alphabet
        """
        if isinstance(code_point, str):
            if len(code_point) != 1:
                return INVALID
            code_point = ord(code_point)
        return _DECODERS[self.kind](code_point)

    def encode_char(self, val: int) -> str:
        """Encode a 6-bit value to a one-character string."""
        return chr(self.encode(val))

    @property
    def charset(self) -> str:
        """All 64 characters, in value order."""
        return _CHARSETS[self.kind]
