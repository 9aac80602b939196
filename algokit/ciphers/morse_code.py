"""Morse code encoding and decoding."""

from __future__ import annotations

__all__ = ["InvalidMorseCodeError", "encode", "decode"]

UNKNOWN_CHARACTER = "........"
UNKNOWN_MORSE_CHARACTER = "_"

_MORSE = {
    "A": ".-", "B": "-...", "C": "-.-.", "D": "-..", "E": ".", "F": "..-.",
    "G": "--.", "H": "....", "I": "..", "J": ".---", "K": "-.-", "L": ".-..",
    "M": "--", "N": "-.", "O": "---", "P": ".--.", "Q": "--.-", "R": ".-.",
    "S": "...", "T": "-", "U": "..-", "V": "...-", "W": ".--", "X": "-..-",
    "Y": "-.--", "Z": "--..",
    "1": ".----", "2": "..---", "3": "...--", "4": "....-", "5": ".....",
    "6": "-....", "7": "--...", "8": "---..", "9": "----.", "0": "-----",
    "&": ".-...", "@": ".--.-.", ":": "---...", ",": "--..--", ".": ".-.-.-",
    "'": ".----.", '"': ".-..-.", "?": "..--..", "/": "-..-.", "=": "-...-",
    "+": ".-.-.", "-": "-....-", "(": "-.--.", ")": "-.--.-", " ": "/",
    "!": "-.-.--",
}

_FROM_MORSE = {code: char for char, code in _MORSE.items()} | {" ": " ", "": ""}

_VALID_SYMBOLS = frozenset(".- /")


class InvalidMorseCodeError(ValueError):
    """Raised when a Morse string holds characters other than '.', '-', ' ' and '/'."""


def encode(message: str) -> str:
    """Encode ``message`` as Morse code, one space between symbols.

    Characters without a Morse equivalent become ``........``.
    """
    return " ".join(_MORSE.get(char.upper(), UNKNOWN_CHARACTER) for char in message)


def _decode_part(part: str) -> str:
    return "".join(
        _FROM_MORSE.get(token, UNKNOWN_MORSE_CHARACTER) for token in part.split(" ")
    )


def decode(string: str) -> str:
    """Decode Morse code; words are separated by '/'.

    Unknown symbol groups decode to ``_``.

    Raises:
        InvalidMorseCodeError: if the input holds any other character.
    """
    if not set(string) <= _VALID_SYMBOLS:
        raise InvalidMorseCodeError("Invalid morse code")
    return " ".join(_decode_part(part) for part in string.split("/"))