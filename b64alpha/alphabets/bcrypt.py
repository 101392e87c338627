# Copyright 2025 Maida.AI
# SPDX-License-Identifier: Apache-2.0
"""BCrypt base-64 ordering."""

from ..constants import INVALID

_DOT = ord(".")
_SLASH = ord("/")
_A, _Z = ord("A"), ord("Z")
_a, _z = ord("a"), ord("z")
_0, _9 = ord("0"), ord("9")


def encode(val: int) -> int:
    """Encode a 6-bit value as a code point from ``./A-Za-z0-9``."""
    if val == 0:
        return _DOT
    elif val == 1:
        return _SLASH
    elif val <= 27:
        return _A + val - 2
    elif val <= 53:
        return _a + val - 28
    else:
        assert val < 64
        return _0 + val - 54


def decode(code_point: int) -> int:
    """Decode a code point, returning INVALID if it is not in the alphabet."""
    if code_point == _DOT:
        return 0
    elif code_point == _SLASH:
        return 1
    elif _A <= code_point <= _Z:
        return code_point - _A + 2
    elif _a <= code_point <= _z:
        return code_point - _a + 28
    elif _0 <= code_point <= _9:
        return code_point - _0 + 54
    return INVALID
