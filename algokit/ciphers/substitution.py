"""Simple character substitution ciphers: ROT13, Caesar, Vigenère and XOR."""

from __future__ import annotations

import string

__all__ = ["another_rot13", "caesar", "rot13", "vigenere", "xor"]

_ROT13_TABLE = str.maketrans(
    string.ascii_uppercase + string.ascii_lowercase,
    "NOPQRSTUVWXYZABCDEFGHIJKLM" + "nopqrstuvwxyzabcdefghijklm",
)


def _check_byte(value: int, name: str) -> None:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} must be in the range 0..255, got {value}")


def _is_ascii_alpha(char: str) -> bool:
    return char.isascii() and char.isalpha()


def _shift_letter(char: str, shift: int) -> str:
    first = ord("a") if char.islower() else ord("A")
    return chr(first + (ord(char) + shift - first) % 26)


def another_rot13(text: str) -> str:
    """Apply ROT13 by table lookup, keeping case and leaving other characters alone."""
    return text.translate(_ROT13_TABLE)


def caesar(cipher: str, shift: int) -> str:
    """Rotate every ASCII letter of ``cipher`` by ``shift`` places."""
    _check_byte(shift, "shift")
    return "".join(
        _shift_letter(char, shift) if _is_ascii_alpha(char) else char for char in cipher
    )


def rot13(text: str) -> str:
    """Upper-case ``text`` and rotate the letters A-Z by 13 places."""

    def rotate(char: str) -> str:
        if "A" <= char <= "M":
            return chr(ord(char) + 13)
        if "N" <= char <= "Z":
            return chr(ord(char) - 13)
        return char

    return "".join(rotate(char) for char in text.upper())


def vigenere(plain_text: str, key: str) -> str:
    """Rotate each ASCII letter by the offset of the next key letter.

    Only ASCII letters of the key are used; an empty key leaves the text unchanged.
    """
    shifts = [ord(char) - ord("a") for char in key.lower() if _is_ascii_alpha(char)]
    if not shifts:
        return plain_text

    result = []
    position = 0
    for char in plain_text:
        if _is_ascii_alpha(char):
            result.append(_shift_letter(char, shifts[position % len(shifts)]))
            position += 1
        else:
            result.append(char)
    return "".join(result)


def xor(text: str, key: int) -> str:
    """XOR the low byte of every character's code point with ``key``."""
    _check_byte(key, "key")
    return "".join(chr((ord(char) & 0xFF) ^ key) for char in text)