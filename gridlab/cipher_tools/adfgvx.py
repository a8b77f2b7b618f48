# cipher_tools/adfgvx.py
"""
ADFGX and ADFGVX: fractionate each letter into a pair of row/column labels
from a keyed square, then scramble the label stream with a keyed columnar
transposition.

ADFGX uses a 5x5 square (I/J merged); ADFGVX uses a 6x6 square holding
A-Z and 0-9.
"""
from .columnar_transposition import (
    apply_transposition, compute_key_order, invert_transposition,
)
from .errors import MalformedCiphertext, require_key
from .polybius_square import (
    ADFGVX, ADFGX, build_square, clean_ciphertext, clean_text,
    from_coordinate, from_label, to_coordinate, to_label,
)


def _fractionating_encode(text, square, labels, order):
    digits = square.size == 6
    letters = clean_text(text, merge_j=not digits, digits=digits)
    stream = "".join(to_label(to_coordinate(square, ch), labels) for ch in letters)
    return apply_transposition(stream, order)


def _fractionating_decode(cipher, square, labels, order):
    symbols = clean_ciphertext(cipher, labels)
    if len(symbols) % 2:
        raise MalformedCiphertext(f"{labels} ciphertext must have an even length")
    stream = invert_transposition(symbols, order, len(symbols))
    return "".join(
        from_coordinate(square, *from_label(stream[i:i + 2], labels))
        for i in range(0, len(stream), 2)
    )


def _setup(square_keyword, trans_keyword, size):
    order = compute_key_order(require_key(trans_keyword, "trans_keyword"))
    square = build_square(square_keyword, size)
    return square, order


# ==============================
#  ADFGX
# ==============================
def adfgx_encode(text, square_keyword="", trans_keyword=None):
    square, order = _setup(square_keyword, trans_keyword, 5)
    return _fractionating_encode(text, square, ADFGX, order)


def adfgx_decode(cipher, square_keyword="", trans_keyword=None):
    square, order = _setup(square_keyword, trans_keyword, 5)
    return _fractionating_decode(cipher, square, ADFGX, order)


# ==============================
#  ADFGVX
# ==============================
def adfgvx_encode(text, square_keyword="", trans_keyword=None):
    square, order = _setup(square_keyword, trans_keyword, 6)
    return _fractionating_encode(text, square, ADFGVX, order)


def adfgvx_decode(cipher, square_keyword="", trans_keyword=None):
    square, order = _setup(square_keyword, trans_keyword, 6)
    return _fractionating_decode(cipher, square, ADFGVX, order)
