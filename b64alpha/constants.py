# Copyright 2025 Maida.AI
# SPDX-License-Identifier: Apache-2.0
"""Base-64 alphabet constants and enums."""

from enum import IntEnum

# ----------------------------------------------------------------------------
# Alphabet constants
# ----------------------------------------------------------------------------

INVALID = -1  # decode() result for a code point outside the alphabet
PAD_CHAR = "="
BITS_PER_CHAR = 6
VALUE_MASK = 0x3F  # 6-bit value
GROUP_BYTES = 3  # bytes per full group
GROUP_CHARS = 4  # characters per full group

# ----------------------------------------------------------------------------
# Character orderings
# ----------------------------------------------------------------------------


class AlphabetKind(IntEnum):
    """Character orderings implemented by Base64Alphabet."""

    STANDARD = 0x0001  # RFC 4648: A-Z a-z 0-9 + /
    MOD_CRYPT = 0x0002  # crypt(3): . / 0-9 A-Z a-z
    BCRYPT = 0x0003  # BCrypt: . / A-Z a-z 0-9


# ----------------------------------------------------------------------------
# Alphabet identifiers
# ----------------------------------------------------------------------------


class AlphabetID(IntEnum):
    """Registry identifiers for the public alphabet constants."""

    STANDARD = 0x01
    MOD_CRYPT = 0x02
    MOD_CRYPT_LE = 0x03
    BCRYPT = 0x04
