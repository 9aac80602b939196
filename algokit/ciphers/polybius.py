"""Polybius square encoding of ASCII letters (I and J share a cell)."""

from __future__ import annotations

from collections.abc import Iterator

__all__ = ["encode_ascii", "decode_ascii"]

_ALPHABET = "ABCDEFGHIKLMNOPQRSTUVWXYZ"

_DECODE = {
    f"{row}{column}".encode("ascii"): letter
    for index, letter in enumerate(_ALPHABET)
    for row, column in [divmod(index, 5)]
    for row, column in [(row + 1, column + 1)]
}

_ENCODE = {letter: code.decode("ascii") for code, letter in _DECODE.items()}
_ENCODE["J"] = _ENCODE["I"]


def encode_ascii(string: str) -> str:
    """Encode the ASCII letters of ``string`` as Polybius coordinates.

    Every other character is dropped.
    """
    return "".join(
        _ENCODE.get(char.upper(), "") if char.isascii() else "" for char in string
    )


def _pairs(data: bytes) -> Iterator[bytes]:
    for start in range(0, len(data), 2):
        yield data[start : start + 2]


def decode_ascii(string: str) -> str:
    """Decode pairs of digits into upper-case letters.

    Whitespace is ignored; pairs that name no cell are dropped.
    """
    compact = "".join(char for char in string if not char.isspace())
    return "".join(_DECODE.get(pair, "") for pair in _pairs(compact.encode("utf-8")))