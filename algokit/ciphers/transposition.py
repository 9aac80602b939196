"""Columnar transposition cipher with one or more keywords."""

from __future__ import annotations

import math

__all__ = ["transposition"]


def _key_order(keyword: str) -> list[int]:
    """Rank of each keyword byte in the stable alphabetical order of the keyword."""
    data = keyword.encode("utf-8")
    ranks = [0] * len(data)
    by_value = sorted(range(len(data)), key=lambda position: data[position])
    for rank, position in enumerate(by_value):
        ranks[position] = rank
    return ranks


def _letters_only(text: str) -> str:
    return "".join(char for char in text.upper() if char.isascii() and char.isalpha())


def _encrypt(msg: str, key_order: list[int]) -> str:
    key_len = len(key_order)
    if len(msg) < key_len:
        raise ValueError(
            f"message of {len(msg)} letters is shorter than the key of {key_len}"
        )
    columns = [msg[position::key_len] for position in range(key_len)]
    ordered = "".join(
        column for _, column in sorted(zip(key_order, columns), key=lambda pair: pair[0])
    )
    group = math.ceil(len(msg) / key_len)
    return " ".join(ordered[start : start + group] for start in range(0, len(ordered), group))


def _decrypt(msg: str, key_order: list[int]) -> str:
    key_len = len(key_order)
    row_count, longer = divmod(len(msg), key_len)
    lengths = [row_count + (1 if position < longer else 0) for position in range(key_len)]

    columns: list[str] = [""] * key_len
    start = 0
    for position in sorted(range(key_len), key=lambda p: key_order[p]):
        columns[position] = msg[start : start + lengths[position]]
        start += lengths[position]

    return "".join(
        column[row]
        for row in range(row_count + 1)
        for column in columns
        if row < len(column)
    )


def transposition(decrypt_mode: bool, msg: str, key: str) -> str:
    """Encrypt or decrypt ``msg`` with each whitespace-separated keyword of ``key``.

    Only ASCII letters of the message are kept, upper-cased. Encryption groups the
    result into blocks separated by spaces; decryption applies the keywords in
    reverse order.

    Raises:
        ValueError: when encrypting a message with fewer letters than a keyword.
    """
    keywords = key.upper().split()
    if decrypt_mode:
        keywords.reverse()

    result = msg
    for keyword in keywords:
        letters = _letters_only(result)
        order = _key_order(keyword)
        result = _decrypt(letters, order) if decrypt_mode else _encrypt(letters, order)
    return result