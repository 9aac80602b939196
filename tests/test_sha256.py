import hashlib

import pytest

from algokit.ciphers.sha256 import sha256


def test_empty():
    assert sha256(b"") == bytes.fromhex(
        "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )


def test_ascii():
    assert sha256(b"The quick brown fox jumps over the lazy dog") == bytes.fromhex(
        "d7a8fbb307d7809469ca9abcb0082e4f8d5651e46d3cdb762d02d0bf37c9e592"
    )


def test_ascii_avalanche():
    assert sha256(b"The quick brown fox jumps over the lazy dog.") == bytes.fromhex(
        "ef537f25c895bfa782526529a9b63d97aa631564d5d789c2b765448c8635fb6c"
    )


@pytest.mark.parametrize("length", [1, 55, 56, 57, 63, 64, 65, 119, 120, 128, 1000])
def test_matches_standard_digest_around_block_boundaries(length):
    data = bytes(i % 251 for i in range(length))
    assert sha256(data) == hashlib.sha256(data).digest()


def test_accepts_bytearray():
    assert sha256(bytearray(b"abc")) == bytes.fromhex(
        "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    )


def test_digest_length():
    assert len(sha256(b"x" * 300)) == 32