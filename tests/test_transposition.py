import string

import pytest

from algokit.ciphers.transposition import transposition

PANGRAM = "The quick brown fox jumps over the lazy dog"
PANGRAM_LETTERS = "THEQUICKBROWNFOXJUMPSOVERTHELAZYDOG"
SYMBOLS = string.ascii_lowercase + string.ascii_uppercase + ".,/;'[]{}:|_+=-`~() "
SYMBOLS_LETTERS = string.ascii_uppercase * 2
DISCOVERED = "WE ARE DISCOVERED. FLEE AT ONCE."
DISCOVERED_LETTERS = "WEAREDISCOVEREDFLEEATONCE"

# (plain text, key, cipher text, plain text as recovered by decryption)
SINGLE_KEY_CASES = [
    (PANGRAM, "Archive", "TKOOL ERJEZ CFSEG QOURY UWMTD HBXVA INPHO", PANGRAM_LETTERS),
    (
        SYMBOLS,
        "Tenacious",
        "DMVENW ENWFOX BKTCLU FOXGPY CLUDMV GPYHQZ IRAJSA JSBKTH QZIR",
        SYMBOLS_LETTERS,
    ),
    (DISCOVERED, "ZEBRAS", "EVLNA CDTES EAROF ODEEC WIREE", DISCOVERED_LETTERS),
]

DOUBLE_KEY_CASES = [
    (PANGRAM, "Archive Snow", "KEZEUWHAH ORCGRMBIO TLESOUDVP OJFQYTXN", PANGRAM_LETTERS),
    (
        SYMBOLS,
        "Tenacious Drink",
        "DWOCXLGZSKI VNBUPDYRJHN FTOCVQJBZEW KFYMHASQMEX LGUPIATR",
        SYMBOLS_LETTERS,
    ),
    (DISCOVERED, "ZEBRAS STRIPE", "CAEEN SOIAE DRLEF WEDRE EVTOC", DISCOVERED_LETTERS),
]


@pytest.mark.parametrize(("plain", "key", "cipher", "recovered"), SINGLE_KEY_CASES)
def test_single_key_encrypts(plain, key, cipher, recovered):
    assert transposition(False, plain, key) == cipher


@pytest.mark.parametrize(("plain", "key", "cipher", "recovered"), SINGLE_KEY_CASES)
def test_single_key_decrypts(plain, key, cipher, recovered):
    assert transposition(True, cipher, key) == recovered


@pytest.mark.parametrize(("plain", "key", "cipher", "recovered"), DOUBLE_KEY_CASES)
def test_two_keys_encrypt(plain, key, cipher, recovered):
    assert transposition(False, plain, key) == cipher


@pytest.mark.parametrize(("plain", "key", "cipher", "recovered"), DOUBLE_KEY_CASES)
def test_two_keys_decrypt(plain, key, cipher, recovered):
    assert transposition(True, cipher, key) == recovered


def test_round_trip_with_uneven_columns():
    plain = "ATTACKATDAWNFROMTHENORTH"
    cipher = transposition(False, plain, "Secret Keys")
    assert transposition(True, cipher, "Secret Keys") == plain


def test_empty_key_returns_message_unchanged():
    assert transposition(False, "Hello, World", "   ") == "Hello, World"


def test_encrypting_message_shorter_than_key_raises():
    with pytest.raises(ValueError):
        transposition(False, "abc", "Archive")