# cipher_tools/polybius_square.py
import logging
import string
from dataclasses import dataclass

from .errors import MalformedCiphertext, SymbolNotInSquare

logger = logging.getLogger(__name__)

AZ25 = "ABCDEFGHIKLMNOPQRSTUVWXYZ"  # J merged to I
AZ36 = string.ascii_uppercase + string.digits

ADFGX = "ADFGX"
ADFGVX = "ADFGVX"
DIGIT_LABELS = "123456"

_BASES = {
    (5, "noJ"): AZ25,
    (6, "alnum"): AZ36,
}


# ==============================
#  Cleaning
# ==============================
def clean_text(text, merge_j=True, digits=False):
    """Uppercase and keep A-Z (and 0-9 when ``digits``); J becomes I when ``merge_j``."""
    allowed = AZ36 if digits else string.ascii_uppercase
    out = "".join(ch for ch in (text or "").upper() if ch in allowed)
    return out.replace("J", "I") if merge_j else out


def strip_separators(text):
    """Drop whitespace and punctuation, keep every alphanumeric symbol."""
    return "".join(ch for ch in (text or "").upper() if ch.isalnum())


def clean_ciphertext(text, allowed):
    """Drop separators, then refuse any symbol that is not in ``allowed``."""
    symbols = strip_separators(text)
    bad = sorted(set(symbols) - set(allowed))
    if bad:
        raise MalformedCiphertext(f"unexpected symbols in ciphertext: {''.join(bad)}")
    return symbols


# ==============================
#  Square
# ==============================
@dataclass(frozen=True)
class Square:
    symbols: str
    size: int

    @property
    def rows(self):
        n = self.size
        return tuple(self.symbols[r * n:(r + 1) * n] for r in range(n))

    def __contains__(self, symbol):
        return isinstance(symbol, str) and len(symbol) == 1 and symbol in self.symbols

    def position(self, symbol):
        return to_coordinate(self, symbol)

    def at(self, row, col):
        return from_coordinate(self, row, col)


def build_square(keyword="", size=5, alphabet=None) -> Square:
    """
    Keyword letters first (deduplicated, in order of first appearance),
    then the rest of the base alphabet. 5x5 squares merge J into I and
    ignore digits; 6x6 squares hold A-Z and 0-9.
    """
    if alphabet is None:
        alphabet = "noJ" if size == 5 else "alnum"
    base = _BASES.get((size, alphabet))
    if base is None:
        raise ValueError(f"unsupported square: size={size!r} alphabet={alphabet!r}")

    if alphabet == "noJ":
        key = clean_text(keyword, merge_j=True)
    else:
        key = clean_text(keyword, merge_j=False, digits=True)

    seen = set()
    ordered = []
    for ch in key + base:
        if ch in base and ch not in seen:
            seen.add(ch)
            ordered.append(ch)
    symbols = "".join(ordered[: size * size])
    logger.debug("built %dx%d square (%d keyword symbols)", size, size, len(set(key)))
    return Square(symbols, size)


# ==============================
#  Coordinate codec
# ==============================
def to_coordinate(square, symbol):
    for index, cell in enumerate(square.symbols):
        if cell == symbol:
            return divmod(index, square.size)
    raise SymbolNotInSquare(f"{symbol!r} is not in the square")


def from_coordinate(square, row, col):
    if not (0 <= row < square.size and 0 <= col < square.size):
        raise SymbolNotInSquare(f"({row}, {col}) is outside a {square.size}x{square.size} square")
    return square.symbols[row * square.size + col]


def to_label(coord, labels):
    row, col = coord
    if row >= len(labels) or col >= len(labels):
        raise SymbolNotInSquare(f"no label for coordinate {coord!r}")
    return labels[row] + labels[col]


def from_label(pair, labels):
    if len(pair) != 2:
        raise MalformedCiphertext(f"coordinate {pair!r} must be two symbols")
    row, col = labels.find(pair[0]), labels.find(pair[1])
    if row < 0 or col < 0:
        raise MalformedCiphertext(f"coordinate {pair!r} uses symbols outside {labels!r}")
    return row, col


def render_square(square, labels=None):
    labels = labels or DIGIT_LABELS[: square.size]
    lines = ["   " + " ".join(labels[: square.size])]
    for label, row in zip(labels, square.rows):
        lines.append(f"{label}  " + " ".join(row))
    return "\n".join(lines)


# ==============================
#  POLYBIUS (Customizable Grid)
# ==============================
def polybius_encode(text, square_keyword=""):
    """Letters to 1-indexed row/column numbers, e.g. A -> 11, Z -> 55."""
    square = build_square(square_keyword, 5)
    labels = DIGIT_LABELS[: square.size]
    return " ".join(to_label(to_coordinate(square, ch), labels) for ch in clean_text(text))


def polybius_decode(cipher, square_keyword=""):
    square = build_square(square_keyword, 5)
    labels = DIGIT_LABELS[: square.size]
    digits = clean_ciphertext(cipher, string.digits)
    if len(digits) % 2:
        raise MalformedCiphertext("Polybius ciphertext has an odd number of digits")
    return "".join(
        from_coordinate(square, *from_label(digits[i:i + 2], labels))
        for i in range(0, len(digits), 2)
    )
