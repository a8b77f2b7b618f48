"""
Bifid over a keyed square
"""
import pytest

from gridlab.cipher_tools.bifid import bifid_decode, bifid_encode
from gridlab.cipher_tools.errors import InvalidKeyLength, MalformedCiphertext

SQUARE = "BGWKZQPNDSIOAXEFCLUMTHYVR"


def test_known_vector_single_block():
    assert bifid_encode("flee at once", SQUARE, 0) == "UAEOLWRINS"
    assert bifid_decode("UAEOLWRINS", SQUARE, 0) == "FLEEATONCE"


@pytest.mark.parametrize("period", [0, 1, 2, 5, 7, "5"])
def test_round_trip(period):
    text = "THEQUICKBROWNFOXIUMPSOVERTHELAZYDOG"
    assert bifid_decode(bifid_encode(text, "KEYWORD", period), "KEYWORD", period) == text


def test_period_one_is_identity():
    assert bifid_encode("HELLO", "KEYWORD", 1) == "HELLO"


def test_bad_period():
    with pytest.raises(InvalidKeyLength):
        bifid_encode("HELLO", "", -1)
    with pytest.raises(InvalidKeyLength):
        bifid_encode("HELLO", "", "five")


def test_decode_rejects_digits():
    with pytest.raises(MalformedCiphertext):
        bifid_decode("HELL0", "")
