import pytest

from algokit.ciphers.tea import TeaCipher, from_block, tea_decrypt, tea_encrypt, to_block


def test_block_convert():
    assert to_block(bytes([0x01, 0x23, 0x45, 0x67, 0x89, 0xAB, 0xCD, 0xEF])) == 0xEFCDAB8967452301
    assert from_block(0xEFCDAB8967452301) == bytes(
        [0x01, 0x23, 0x45, 0x67, 0x89, 0xAB, 0xCD, 0xEF]
    )


def test_tea_encrypt():
    assert tea_encrypt(bytes(8), bytes(16)) == bytes(
        [0x0A, 0x3A, 0xEA, 0x41, 0x40, 0xA9, 0xBA, 0x94]
    )


def test_tea_encdec():
    plain = bytes([0x1B, 0xCC, 0xD4, 0x31, 0xA0, 0xF6, 0x8A, 0x55])
    key = bytes(
        [0x20, 0x45, 0x08, 0x10, 0xB0, 0x23, 0xE2, 0x17,
         0xC3, 0x81, 0xD6, 0xF2, 0xEE, 0x00, 0xA4, 0x8A]
    )
    cipher = tea_encrypt(plain, key)
    assert tea_decrypt(cipher, key) == plain


def test_block_cipher_round_trip():
    tea = TeaCipher(0x0123456789ABCDEF, 0xFEDCBA9876543210)
    block = 0x1122334455667788
    assert tea.decrypt_block(tea.encrypt_block(block)) == block


def test_multi_block_round_trip():
    plain = bytes(range(24))
    key = bytes(range(16))
    cipher = tea_encrypt(plain, key)
    assert len(cipher) == 24
    assert tea_decrypt(cipher, key) == plain


def test_short_key_rejected():
    with pytest.raises(ValueError):
        tea_encrypt(bytes(8), bytes(8))


def test_partial_block_rejected():
    with pytest.raises(ValueError):
        tea_encrypt(bytes(5), bytes(16))