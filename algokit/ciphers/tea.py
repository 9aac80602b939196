"""The Tiny Encryption Algorithm on 64-bit little-endian blocks."""

from __future__ import annotations

__all__ = ["TeaCipher", "to_block", "from_block", "tea_encrypt", "tea_decrypt"]

_MASK32 = 0xFFFFFFFF
_DELTA = 0x9E3779B9
_DECRYPT_SUM = 0xC6EF3720
_ROUNDS = 32
BLOCK_SIZE = 8
KEY_SIZE = 16


def _split(value: int) -> tuple[int, int]:
    return value & _MASK32, (value >> 32) & _MASK32


def _join(low: int, high: int) -> int:
    return (high << 32) | low


class TeaCipher:
    """TEA with a 128-bit key given as two 64-bit halves."""

    def __init__(self, key0: int, key1: int) -> None:
        self._k0, self._k1 = _split(key0)
        self._k2, self._k3 = _split(key1)

    def encrypt_block(self, block: int) -> int:
        """Encrypt one 64-bit block."""
        b0, b1 = _split(block)
        k0, k1, k2, k3 = self._k0, self._k1, self._k2, self._k3
        total = 0
        for _ in range(_ROUNDS):
            total = (total + _DELTA) & _MASK32
            b0 = (b0 + (((b1 << 4) + k0) ^ (b1 + total) ^ ((b1 >> 5) + k1))) & _MASK32
            b1 = (b1 + (((b0 << 4) + k2) ^ (b0 + total) ^ ((b0 >> 5) + k3))) & _MASK32
        return _join(b0, b1)

    def decrypt_block(self, block: int) -> int:
        """Decrypt one 64-bit block."""
        b0, b1 = _split(block)
        k0, k1, k2, k3 = self._k0, self._k1, self._k2, self._k3
        total = _DECRYPT_SUM
        for _ in range(_ROUNDS):
            b1 = (b1 - (((b0 << 4) + k2) ^ (b0 + total) ^ ((b0 >> 5) + k3))) & _MASK32
            b0 = (b0 - (((b1 << 4) + k0) ^ (b1 + total) ^ ((b1 >> 5) + k1))) & _MASK32
            total = (total - _DELTA) & _MASK32
        return _join(b0, b1)


def to_block(data: bytes) -> int:
    """Read the first eight bytes of ``data`` as a little-endian integer."""
    if len(data) < BLOCK_SIZE:
        raise ValueError(f"a block needs {BLOCK_SIZE} bytes, got {len(data)}")
    return int.from_bytes(bytes(data[:BLOCK_SIZE]), "little")


def from_block(block: int) -> bytes:
    """Write a 64-bit block as eight little-endian bytes."""
    return (block & 0xFFFFFFFFFFFFFFFF).to_bytes(BLOCK_SIZE, "little")


def _cipher_for(key: bytes) -> TeaCipher:
    if len(key) < KEY_SIZE:
        raise ValueError(f"the key needs {KEY_SIZE} bytes, got {len(key)}")
    return TeaCipher(to_block(key[:8]), to_block(key[8:16]))


def _blocks(data: bytes):
    if len(data) % BLOCK_SIZE:
        raise ValueError(f"data length must be a multiple of {BLOCK_SIZE}, got {len(data)}")
    for start in range(0, len(data), BLOCK_SIZE):
        yield to_block(data[start : start + BLOCK_SIZE])


def tea_encrypt(plain: bytes, key: bytes) -> bytes:
    """Encrypt ``plain`` (a multiple of eight bytes) with a 16-byte key."""
    tea = _cipher_for(bytes(key))
    return b"".join(from_block(tea.encrypt_block(block)) for block in _blocks(bytes(plain)))


def tea_decrypt(cipher: bytes, key: bytes) -> bytes:
    """Decrypt ``cipher`` (a multiple of eight bytes) with a 16-byte key."""
    tea = _cipher_for(bytes(key))
    return b"".join(from_block(tea.decrypt_block(block)) for block in _blocks(bytes(cipher)))