# cipher_tools/checkerboard.py
"""
Straddling checkerboard.

Two digits are set aside as escapes. The eight remaining digits encode the
first eight letters of the keyed alphabet on their own; the other seventeen
letters get two-digit codes that start with an escape digit. Decoding reads
left to right: an escape digit always opens a two-digit code.
"""
import logging
import re
from dataclasses import dataclass
from typing import Dict, Tuple

from .errors import InvalidKeyLength, MalformedCiphertext, SymbolNotInSquare, require_key
from .polybius_square import AZ25, clean_ciphertext, clean_text

logger = logging.getLogger(__name__)

DIGITS = "0123456789"


@dataclass(frozen=True)
class Checkerboard:
    escapes: Tuple[int, int]
    encoding: Dict[str, str]
    decoding: Dict[str, str]

    def code_for(self, letter):
        try:
            return self.encoding["I" if letter == "J" else letter]
        except KeyError:
            raise SymbolNotInSquare(f"{letter!r} has no checkerboard code")


def parse_escape_digits(escape_digits):
    """Accepts "2 6", "26", "2,6" or a pair of ints."""
    if isinstance(escape_digits, int):
        escape_digits = str(escape_digits)
    if escape_digits is None or isinstance(escape_digits, str):
        text = require_key(escape_digits, "escape_digits").strip()
        tokens = [t for t in re.split(r"[\s,;]+", text) if t]
        if len(tokens) == 1:
            tokens = list(tokens[0])
    else:
        tokens = list(escape_digits)

    digits = []
    for tok in tokens:
        if isinstance(tok, int) and not isinstance(tok, bool):
            value = tok
        elif isinstance(tok, str) and len(tok) == 1 and tok in DIGITS:
            value = int(tok)
        else:
            raise InvalidKeyLength(f"escape digit {tok!r} is not a single digit")
        if not 0 <= value <= 9:
            raise InvalidKeyLength(f"escape digit {value} is outside 0-9")
        digits.append(value)

    if len(digits) != 2 or digits[0] == digits[1]:
        raise InvalidKeyLength("checkerboard needs exactly two distinct escape digits")
    return digits[0], digits[1]


def keyed_alphabet(keyword):
    seen = []
    for ch in clean_text(keyword) + AZ25:
        if ch not in seen:
            seen.append(ch)
    return "".join(seen)


def build_checkerboard(keyword="", escape_digits=None) -> Checkerboard:
    escapes = parse_escape_digits(escape_digits)
    letters = iter(keyed_alphabet(keyword))

    codes = [str(d) for d in range(10) if d not in escapes]
    for e in escapes:
        codes.extend(f"{e}{d}" for d in range(10))

    encoding = {}
    for code, letter in zip(codes, letters):
        encoding[letter] = code
    decoding = {code: letter for letter, code in encoding.items()}
    logger.debug("checkerboard built with escapes %s", escapes)
    return Checkerboard(escapes, encoding, decoding)


def render_checkerboard(board: Checkerboard):
    header = "   " + " ".join(DIGITS)
    top = "   " + " ".join(board.decoding.get(d, " ") for d in DIGITS)
    lines = [header, top]
    for e in board.escapes:
        lines.append(f"{e}  " + " ".join(board.decoding.get(f"{e}{d}", " ") for d in DIGITS))
    return "\n".join(line.rstrip() for line in lines)


def checkerboard_encode(text, keyword="", escape_digits=None):
    board = build_checkerboard(keyword, escape_digits)
    return " ".join(board.code_for(ch) for ch in clean_text(text))


def checkerboard_decode(cipher, keyword="", escape_digits=None):
    board = build_checkerboard(keyword, escape_digits)
    digits = clean_ciphertext(cipher, DIGITS)
    escapes = {str(e) for e in board.escapes}
    out = []
    i = 0
    while i < len(digits):
        width = 2 if digits[i] in escapes else 1
        code = digits[i:i + width]
        if len(code) < width:
            raise MalformedCiphertext(f"escape digit {digits[i]} at the end has no second digit")
        letter = board.decoding.get(code)
        if letter is None:
            raise MalformedCiphertext(f"{code} is not on the checkerboard")
        out.append(letter)
        i += width
    return "".join(out)
