# Copyright 2025 Maida.AI
# SPDX-License-Identifier: Apache-2.0
"""RFC 4648 base-64 ordering."""

from ..constants import INVALID

_A, _Z = ord("A"), ord("Z")
_a, _z = ord("a"), ord("z")
_0, _9 = ord("0"), ord("9")
_PLUS = ord("+")
_SLASH = ord("/")


def encode(val: int) -> int:
    """Encode a 6-bit value as a code point from ``A-Za-z0-9+/``."""
    if val <= 25:
        return _A + val
    elif val <= 51:
        return _a + val - 26
    elif val <= 61:
        return _0 + val - 52
    elif val == 62:
        return _PLUS
    else:
        assert val == 63
        return _SLASH


def decode(code_point: int) -> int:
    """Decode a code point, returning INVALID if it is not in the alphabet."""
    if _A <= code_point <= _Z:
        return code_point - _A
    elif _a <= code_point <= _z:
        return code_point - _a + 26
    elif _0 <= code_point <= _9:
        return code_point - _0 + 52
    elif code_point == _PLUS:
        return 62
    elif code_point == _SLASH:
        return 63
    return INVALID
