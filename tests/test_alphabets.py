"""Tests for the base-64 alphabets."""

import pytest
from pydantic import ValidationError

from b64alpha import BCRYPT, INVALID, MOD_CRYPT, MOD_CRYPT_LE, STANDARD, AlphabetKind, Base64Alphabet

ALL_ALPHABETS = [STANDARD, MOD_CRYPT, MOD_CRYPT_LE, BCRYPT]


@pytest.mark.parametrize("alphabet", ALL_ALPHABETS)
def test_round_trip(alphabet: Base64Alphabet) -> None:
    """Every 6-bit value decodes back to itself."""
    for val in range(64):
        assert alphabet.decode(alphabet.encode(val)) == val
        assert alphabet.decode(alphabet.encode_char(val)) == val


@pytest.mark.parametrize("alphabet", ALL_ALPHABETS)
def test_encode_is_injective(alphabet: Base64Alphabet) -> None:
    """No two values share a character."""
    charset = alphabet.charset
    assert len(charset) == 64
    assert len(set(charset)) == 64


@pytest.mark.parametrize("alphabet", ALL_ALPHABETS)
def test_decode_rejects_foreign_code_points(alphabet: Base64Alphabet) -> None:
    """Code points outside the alphabet decode to INVALID without raising."""
    produced = {ord(c) for c in alphabet.charset}
    for code_point in range(0x10000):
        if code_point not in produced:
            assert alphabet.decode(code_point) == INVALID
    assert alphabet.decode(0x10FFFF) == INVALID
    assert alphabet.decode(-5) == INVALID


@pytest.mark.parametrize("alphabet", ALL_ALPHABETS)
def test_decode_rejects_non_single_char_strings(alphabet: Base64Alphabet) -> None:
    """Empty and multi-character strings are not code points."""
    assert alphabet.decode("") == INVALID
    assert alphabet.decode("AB") == INVALID
    assert alphabet.decode("=") == INVALID


def test_standard_vectors() -> None:
    """RFC 4648 character positions."""
    expected = {0: "A", 25: "Z", 26: "a", 51: "z", 52: "0", 61: "9", 62: "+", 63: "/"}
    for val, char in expected.items():
        assert STANDARD.encode(val) == ord(char)
    assert STANDARD.decode("+") == 62
    assert STANDARD.decode(ord("/")) == 63
    assert STANDARD.decode("!") == INVALID
    assert STANDARD.decode(".") == INVALID
    assert STANDARD.charset == "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"


def test_mod_crypt_vectors() -> None:
    """Modular crypt character positions."""
    expected = {0: ".", 1: "/", 2: "0", 11: "9", 12: "A", 37: "Z", 38: "a", 63: "z"}
    for val, char in expected.items():
        assert MOD_CRYPT.encode(val) == ord(char)
    assert MOD_CRYPT.decode("+") == INVALID
    assert MOD_CRYPT.charset == "./0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"


def test_bcrypt_vectors() -> None:
    """BCrypt character positions."""
    expected = {0: ".", 1: "/", 2: "A", 27: "Z", 28: "a", 53: "z", 54: "0", 63: "9"}
    for val, char in expected.items():
        assert BCRYPT.encode(val) == ord(char)
    assert BCRYPT.decode("+") == INVALID
    assert BCRYPT.charset == "./ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"


def test_mod_crypt_le_shares_table() -> None:
    """MOD_CRYPT and MOD_CRYPT_LE differ only in endianness."""
    assert MOD_CRYPT.kind == MOD_CRYPT_LE.kind == AlphabetKind.MOD_CRYPT
    assert MOD_CRYPT.charset == MOD_CRYPT_LE.charset
    for code_point in range(0x80):
        assert MOD_CRYPT.decode(code_point) == MOD_CRYPT_LE.decode(code_point)
    assert MOD_CRYPT.little_endian is False
    assert MOD_CRYPT_LE.little_endian is True


def test_endianness_flags() -> None:
    """Only MOD_CRYPT_LE is little-endian."""
    assert STANDARD.little_endian is False
    assert BCRYPT.little_endian is False
    assert MOD_CRYPT.little_endian is False
    assert MOD_CRYPT_LE.little_endian is True


def test_orderings_differ() -> None:
    """The three character orderings are pairwise different."""
    assert len({STANDARD.charset, MOD_CRYPT.charset, BCRYPT.charset}) == 3


def test_alphabets_are_frozen() -> None:
    """Alphabet attributes cannot be reassigned."""
    with pytest.raises(ValidationError):
        STANDARD.little_endian = True  # type: ignore[misc]
    with pytest.raises(ValidationError):
        BCRYPT.kind = AlphabetKind.STANDARD  # type: ignore[misc]
    assert STANDARD.little_endian is False


def test_custom_instance_equals_constant() -> None:
    """Alphabets compare and hash by value."""
    alphabet = Base64Alphabet(kind=AlphabetKind.MOD_CRYPT, little_endian=True)
    assert alphabet == MOD_CRYPT_LE
    assert alphabet != MOD_CRYPT
    assert hash(alphabet) == hash(MOD_CRYPT_LE)


def test_out_of_range_encode_asserts() -> None:
    """Values above 63 violate the encode contract."""
    with pytest.raises(AssertionError):
        STANDARD.encode(64)
    with pytest.raises(AssertionError):
        BCRYPT.encode(64)


@pytest.mark.parametrize("alphabet", ALL_ALPHABETS)
def test_charset_matches_encode(alphabet: Base64Alphabet) -> None:
    """The precomputed charset agrees with encode() and is not rebuilt per read."""
    assert alphabet.charset == "".join(alphabet.encode_char(val) for val in range(64))
    assert alphabet.charset is alphabet.charset
