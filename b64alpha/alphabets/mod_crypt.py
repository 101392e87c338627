# Copyright 2025 Maida.AI
# SPDX-License-Identifier: Apache-2.0
"""Modular crypt base-64 ordering.

Shared by the big-endian and little-endian modular crypt alphabets; the
two differ only in how a codec packs bits, never in the character table.
"""

from ..constants import INVALID

_DOT = ord(".")
_SLASH = ord("/")
_0, _9 = ord("0"), ord("9")
_A, _Z = ord("A"), ord("Z")
_a, _z = ord("a"), ord("z")


def encode(val: int) -> int:
    """Encode a 6-bit value as a code point from ``./0-9A-Za-z``."""
    if val == 0:
        return _DOT
    elif val == 1:
        return _SLASH
    elif val <= 11:
        return _0 + val - 2
    elif val <= 37:
        return _A + val - 12
    else:
        assert val < 64
        return _a + val - 38


def decode(code_point: int) -> int:
    """Decode a code point, returning INVALID if it is not in the alphabet."""
    if code_point == _DOT:
        return 0
    elif code_point == _SLASH:
        return 1
    elif _0 <= code_point <= _9:
        return code_point - _0 + 2
    elif _A <= code_point <= _Z:
        return code_point - _A + 12
    elif _a <= code_point <= _z:
        return code_point - _a + 38
    return INVALID
