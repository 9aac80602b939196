from algokit.ciphers.polybius import decode_ascii, encode_ascii


def test_encode_empty():
    assert encode_ascii("") == ""


def test_encode_valid_string():
    assert encode_ascii("This is a test") == "4423244324431144154344"


def test_encode_emoji():
    assert encode_ascii("🙂") == ""


def test_encode_i_and_j_share_cell():
    assert encode_ascii("iJ") == "2424"


def test_decode_empty():
    assert decode_ascii("") == ""


def test_decode_valid_string():
    assert decode_ascii("44 23 24 43 24 43 11 44 15 43 44 ") == "THISISATEST"


def test_decode_emoji():
    assert decode_ascii("🙂") == ""


def test_decode_string_with_whitespace():
    assert (
        decode_ascii("44\n23\t\r24\r\n43   2443\n 11 \t 44\r \r15 \n43 44")
        == "THISISATEST"
    )


def test_decode_unknown_string():
    assert decode_ascii("94 63 64 83 64 48 77 00 05 47 48 ") == ""


def test_decode_odd_length():
    assert decode_ascii("11 22 33 4") == "AGN"


def test_encode_and_decode():
    text = "Do you ever wonder why we're here?"
    encoded = encode_ascii(text)
    assert encoded == "1434543445155115425234331415425223545215421523154215"
    assert decode_ascii(encoded) == "DOYOUEVERWONDERWHYWEREHERE"