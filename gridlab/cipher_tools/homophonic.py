# cipher_tools/homophonic.py
"""
Homophonic substitution.

Each letter owns several interchangeable codes; encoding picks one at
random per occurrence, so the same plaintext encodes differently each time.
Decoding is a plain reverse lookup, which only works when no code belongs
to two letters. That is checked when the map is built.

The random source is always passed in (or created per call) so tests can
seed it.
"""
import logging
import random

from .errors import AmbiguousReverseMapping, MalformedCiphertext, MalformedMapping

logger = logging.getLogger(__name__)

DEFAULT_HOMOPHONES = {
    "A": ("12", "45", "78"),
    "B": ("23", "56"),
    "C": ("34", "67"),
    "D": ("89", "01"),
    "E": ("90", "13", "46", "79"),
    "F": ("24", "57"),
    "G": ("35", "68"),
    "H": ("80", "14"),
    "I": ("25", "58", "91"),
    "J": ("36",),
    "K": ("69",),
    "L": ("81", "15"),
    "M": ("26", "59"),
    "N": ("37", "70", "92"),
    "O": ("82", "16", "49"),
    "P": ("27", "60"),
    "Q": ("38",),
    "R": ("71", "93", "17"),
    "S": ("83", "28", "61"),
    "T": ("39", "72", "94", "18"),
    "U": ("84", "29"),
    "V": ("62",),
    "W": ("95", "30"),
    "X": ("73",),
    "Y": ("85", "31"),
    "Z": ("96",),
}

# codes per letter for generated maps, roughly following English frequency
LETTER_WEIGHTS = {
    "E": 4, "T": 4, "A": 3, "O": 3, "I": 3, "N": 3, "S": 3, "H": 2, "R": 2,
    "D": 2, "L": 2, "U": 2, "C": 2, "M": 2, "W": 2, "F": 2, "G": 2, "Y": 2,
    "P": 2, "B": 1, "V": 1, "K": 1, "J": 1, "X": 1, "Q": 1, "Z": 1,
}


class HomophoneMap:
    def __init__(self, mapping):
        forward = {}
        reverse = {}
        for letter, codes in mapping.items():
            letter = str(letter).strip().upper()
            if len(letter) != 1 or not letter.isalpha():
                raise MalformedMapping(f"{letter!r} is not a single letter")
            if isinstance(codes, str):
                codes = [codes]
            if not isinstance(codes, (list, tuple)) or not all(isinstance(c, str) for c in codes):
                raise MalformedMapping(f"codes for {letter} must be strings")
            codes = tuple(c.strip() for c in codes)
            if not codes or any(not c or len(c.split()) != 1 for c in codes):
                raise MalformedMapping(f"{letter} needs at least one non-blank code")
            for code in codes:
                owner = reverse.get(code)
                if owner is not None:
                    raise AmbiguousReverseMapping(
                        f"code {code} is assigned to both {owner} and {letter}"
                    )
                reverse[code] = letter
            forward[letter] = forward.get(letter, ()) + codes
        self.forward = forward
        self.reverse = reverse

    def encode_letter(self, letter, rng):
        return rng.choice(self.forward[letter])

    def decode_code(self, code):
        try:
            return self.reverse[code]
        except KeyError:
            raise MalformedCiphertext(f"unknown homophone code {code!r}")


def parse_mapping(text):
    """
    Parse lines of the form ``A: 12, 45, 78``. Blank lines are skipped.
    """
    mapping = {}
    for lineno, line in enumerate((text or "").splitlines(), 1):
        if not line.strip():
            continue
        letter, sep, codes = line.partition(":")
        if not sep:
            raise MalformedMapping(f"line {lineno}: expected 'LETTER: code, code'")
        key = letter.strip().upper()
        if key in mapping:
            raise MalformedMapping(f"line {lineno}: {key} is listed twice")
        mapping[key] = [c.strip() for c in codes.split(",") if c.strip()]
    if not mapping:
        raise MalformedMapping("mapping is empty")
    return mapping


def build_homophones(custom_mapping=None) -> HomophoneMap:
    if custom_mapping is None or (isinstance(custom_mapping, str) and not custom_mapping.strip()):
        return HomophoneMap(DEFAULT_HOMOPHONES)
    if isinstance(custom_mapping, str):
        custom_mapping = parse_mapping(custom_mapping)
    if not isinstance(custom_mapping, dict):
        raise MalformedMapping("custom mapping must be text or a letter -> codes table")
    return HomophoneMap(custom_mapping)


def generate_mapping(rng=None):
    """Deal shuffled codes 00-99 to the letters by LETTER_WEIGHTS."""
    rng = rng or random.Random()
    codes = [f"{i:02d}" for i in range(100)]
    rng.shuffle(codes)
    mapping = {}
    index = 0
    for letter in sorted(LETTER_WEIGHTS):
        count = LETTER_WEIGHTS[letter]
        mapping[letter] = tuple(codes[index:index + count])
        index += count
    return mapping


def format_mapping(mapping):
    return "\n".join(f"{letter}: {', '.join(codes)}" for letter, codes in sorted(mapping.items()))


def homophonic_encode(text, custom_mapping=None, rng=None):
    homophones = build_homophones(custom_mapping)
    rng = rng or random.Random()
    letters = [ch for ch in (text or "").upper() if ch in homophones.forward]
    logger.debug("homophonic encode of %d letters", len(letters))
    return " ".join(homophones.encode_letter(ch, rng) for ch in letters)


def homophonic_decode(cipher, custom_mapping=None):
    homophones = build_homophones(custom_mapping)
    return "".join(homophones.decode_code(code) for code in (cipher or "").split())
