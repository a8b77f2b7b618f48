"""
Playfair digraph rules and text preparation
"""
import pytest

from gridlab.cipher_tools.digraphs import decrypt_digraph, encrypt_digraph
from gridlab.cipher_tools.errors import MalformedCiphertext
from gridlab.cipher_tools.playfair import (
    insert_fillers, playfair_decode, playfair_encode, prepare_playfair_text,
)
from gridlab.cipher_tools.polybius_square import build_square


def test_filler_goes_between_doubled_letters():
    assert insert_fillers("HELLO") == "HELXLO"
    assert insert_fillers("BALLOON") == "BALXLOXON"


def test_prepare_pads_odd_length():
    assert prepare_playfair_text("hello") == "HELXLO"
    assert prepare_playfair_text("balloon") == "BALXLOXONX"
    assert prepare_playfair_text("Jam") == "IAMX"


def test_doubled_x_uses_alternate_filler():
    assert insert_fillers("XX") == "XQX"
    assert prepare_playfair_text("AX") == "AX"
    assert prepare_playfair_text("ABX") == "ABXQ"


def test_prepared_digraphs_never_repeat_a_letter():
    prepared = prepare_playfair_text("XXX BOOKKEEPER XX")
    for i in range(0, len(prepared), 2):
        assert prepared[i] != prepared[i + 1]


def test_digraph_rules():
    square = build_square("PLAYFAIR", 5)
    # P L A Y F / I R B C D / E G H K M / N O Q S T / U V W X Z
    assert encrypt_digraph(square, "H", "E") == ("K", "G")    # same row
    assert encrypt_digraph(square, "L", "O") == ("R", "V")    # same column
    assert encrypt_digraph(square, "L", "X") == ("Y", "V")    # rectangle
    assert encrypt_digraph(square, "F", "P") == ("P", "L")    # row wraps
    assert encrypt_digraph(square, "V", "L") == ("L", "R")    # column wraps
    assert decrypt_digraph(square, "K", "G") == ("H", "E")
    assert decrypt_digraph(square, "R", "V") == ("L", "O")
    assert decrypt_digraph(square, "Y", "V") == ("L", "X")


def test_hello_with_playfair_keyword():
    assert playfair_encode("HELLO", "PLAYFAIR") == "KGYVRV"
    assert playfair_decode("KGYVRV", "PLAYFAIR") == "HELXLO"


def test_known_vector():
    cipher = playfair_encode("Hide the gold in the tree stump", "playfair example")
    assert cipher == "BMODZBXDNABEKUDMUIXMMOUVIF"
    assert playfair_decode(cipher, "playfair example") == "HIDETHEGOLDINTHETREXESTUMP"


def test_round_trip_over_prepared_text():
    prepared = prepare_playfair_text("the quick brown fox jumps over the lazy dog")
    assert playfair_decode(playfair_encode(prepared, "MONARCHY"), "MONARCHY") == prepared


def test_empty_keyword_uses_plain_square():
    assert playfair_decode(playfair_encode("SECRET"), "") == "SECRET"


def test_decode_rejects_odd_length_and_digits():
    with pytest.raises(MalformedCiphertext):
        playfair_decode("ABC", "KEY")
    with pytest.raises(MalformedCiphertext):
        playfair_decode("AB12", "KEY")
