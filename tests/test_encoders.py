"""
Registry dispatch and the encode/decode round trip for every cipher
"""
import random

import pytest

from gridlab.cipher_tools.encoders import CIPHERS, get_cipher, perform_cipher, render_tables
from gridlab.cipher_tools.errors import UnknownCipher
from gridlab.cipher_tools.homophonic import format_mapping, generate_mapping

KEYS = {
    "playfair": {"square_keyword": "MONARCHY"},
    "adfgx": {"square_keyword": "PHQGIUMEAYLNOFDXKRCVSTZWB", "trans_keyword": "SECRET"},
    "adfgvx": {"square_keyword": "NACHTBOMMENWERPER8159427360", "trans_keyword": "DEUTSCH"},
    "foursquare": {"key1": "EXAMPLE", "key2": "KEYWORD"},
    "nihilist": {"square_keyword": "KEYWORD", "key_phrase": "SECRET"},
    "checkerboard": {"keyword": "KEYWORD", "escape_digits": "2 6"},
    "porta": {"key": "SECRET"},
    "homophonic": {},
    "polybius": {"square_keyword": "ZEBRAS"},
    "columnar": {"trans_keyword": "ZEBRAS"},
    "bifid": {"square_keyword": "KEYWORD", "period": 5},
}

# no doubled letters, even length, no J: survives every cipher's cleaning as is
PLAIN = "WEAREDISCOVEREDFLEATONCE"


def test_every_cipher_has_keys_here():
    assert set(KEYS) == set(CIPHERS)


@pytest.mark.parametrize("name", sorted(CIPHERS))
def test_round_trip(name):
    cipher = perform_cipher(name, PLAIN, KEYS[name], mode="encode", rng=random.Random(3))
    assert perform_cipher(name, cipher, KEYS[name], mode="decode") == PLAIN


def test_extra_keys_are_ignored():
    keys = {"key": "SECRET", "square_keyword": "unused", "junk": 1}
    assert perform_cipher("porta", "HELLO", keys) == perform_cipher("porta", "HELLO", {"key": "SECRET"})


def test_name_lookup_is_forgiving():
    assert get_cipher(" Playfair ") is CIPHERS["playfair"]


def test_unknown_cipher():
    with pytest.raises(UnknownCipher):
        perform_cipher("enigma", "HELLO", {})


def test_unknown_mode():
    with pytest.raises(ValueError):
        perform_cipher("porta", "HELLO", {"key": "K"}, mode="sideways")


def test_render_tables():
    assert render_tables("adfgvx", {"square_keyword": ""})["square"].splitlines()[0] == "   A D F G V X"
    assert set(render_tables("foursquare", {"key1": "A", "key2": "B"})) == {"plain", "key1", "key2"}
    assert "board" in render_tables("checkerboard", {"escape_digits": "2 6"})
    assert render_tables("porta", {"key": "X"}) == {}
    with pytest.raises(UnknownCipher):
        render_tables("rot13")


def test_render_tables_can_generate_a_mapping():
    shown = render_tables("homophonic", {"generate": True}, rng=random.Random(42))
    assert shown == {"mapping": format_mapping(generate_mapping(random.Random(42)))}
    assert render_tables("homophonic", {"generate": False})["mapping"].startswith("A: 12, 45, 78")
