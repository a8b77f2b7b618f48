"""
Homophonic substitution with an injected random source
"""
import random

import pytest

from gridlab.cipher_tools.errors import AmbiguousReverseMapping, MalformedCiphertext, MalformedMapping
from gridlab.cipher_tools.homophonic import (
    DEFAULT_HOMOPHONES, HomophoneMap, build_homophones, format_mapping,
    generate_mapping, homophonic_decode, homophonic_encode, parse_mapping,
)


class FirstChoice:
    def choice(self, seq):
        return seq[0]


class LastChoice:
    def choice(self, seq):
        return seq[-1]


def test_default_map_is_injective():
    homophones = HomophoneMap(DEFAULT_HOMOPHONES)
    assert len(homophones.reverse) == sum(len(c) for c in DEFAULT_HOMOPHONES.values())


def test_encode_uses_injected_source():
    assert homophonic_encode("EAT", rng=FirstChoice()) == "90 12 39"
    assert homophonic_encode("EAT", rng=LastChoice()) == "79 78 18"


def test_seeded_encoding_is_repeatable():
    a = homophonic_encode("ATTACK AT DAWN", rng=random.Random(7))
    b = homophonic_encode("ATTACK AT DAWN", rng=random.Random(7))
    assert a == b


@pytest.mark.parametrize("seed", range(5))
def test_round_trip_whatever_code_is_picked(seed):
    cipher = homophonic_encode("Meet me at the usual place", rng=random.Random(seed))
    assert homophonic_decode(cipher) == "MEETMEATTHEUSUALPLACE"


def test_shared_code_is_rejected():
    with pytest.raises(AmbiguousReverseMapping):
        HomophoneMap({"A": ["12", "34"], "B": ["12"]})
    with pytest.raises(AmbiguousReverseMapping):
        build_homophones("A: 12\nB: 12")


def test_bad_mappings():
    with pytest.raises(MalformedMapping):
        HomophoneMap({"A": []})
    with pytest.raises(MalformedMapping):
        HomophoneMap({"AB": ["1"]})
    with pytest.raises(MalformedMapping):
        parse_mapping("A 12 13")
    with pytest.raises(MalformedMapping):
        parse_mapping("A: 1\na: 2")


def test_custom_mapping_text():
    mapping = "A: 1, 2\nB: 3\n\nC: 4"
    cipher = homophonic_encode("cab!", mapping, rng=FirstChoice())
    assert cipher == "4 1 3"
    assert homophonic_decode("4 2 3", mapping) == "CAB"


def test_letters_outside_custom_map_are_dropped():
    assert homophonic_encode("ABZ", {"A": ["x1"], "B": ["x2"]}, rng=FirstChoice()) == "x1 x2"


def test_unknown_code():
    with pytest.raises(MalformedCiphertext):
        homophonic_decode("12 00")


def test_generated_mapping_round_trips():
    mapping = generate_mapping(random.Random(42))
    assert set(mapping) == set(DEFAULT_HOMOPHONES)
    codes = [c for group in mapping.values() for c in group]
    assert len(codes) == len(set(codes))
    text = format_mapping(mapping)
    cipher = homophonic_encode("ENEMY AHEAD", text, rng=random.Random(1))
    assert homophonic_decode(cipher, text) == "ENEMYAHEAD"


@pytest.mark.parametrize("mapping", [{"A": 12}, {"A": [12, 45]}, {"A": None}, ["A: 12"], 12])
def test_mapping_values_must_be_text(mapping):
    with pytest.raises(MalformedMapping):
        build_homophones(mapping)
