#!/usr/bin/env python3
"""Demo script showing the base-64 alphabets."""

from b64alpha import BCRYPT, INVALID, MOD_CRYPT, MOD_CRYPT_LE, STANDARD, base64_decode, base64_encode


def demo_alphabets():
    """Print each alphabet's character table and endianness."""
    for name, alphabet in [
        ("STANDARD", STANDARD),
        ("MOD_CRYPT", MOD_CRYPT),
        ("MOD_CRYPT_LE", MOD_CRYPT_LE),
        ("BCRYPT", BCRYPT),
    ]:
        order = "little" if alphabet.little_endian else "big"
        print(f"{name:<13} {order:<7} {alphabet.charset}")

    print(f"STANDARD.decode('!') == {STANDARD.decode('!')} (INVALID is {INVALID})")


def demo_codec():
    """Encode the same salt with every alphabet and decode it back."""
    salt = bytes.fromhex("5c4d2e1f00a0ffee0102")
    print(f"\nSalt: {salt.hex()}")
    for name, alphabet in [
        ("STANDARD", STANDARD),
        ("MOD_CRYPT", MOD_CRYPT),
        ("MOD_CRYPT_LE", MOD_CRYPT_LE),
        ("BCRYPT", BCRYPT),
    ]:
        text = base64_encode(salt, alphabet)
        assert base64_decode(text, alphabet) == salt
        print(f"{name:<13} {text}")


if __name__ == "__main__":
    demo_alphabets()
    demo_codec()
