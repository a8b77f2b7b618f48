# cipher_tools/digraphs.py
"""
Digraph substitution rules shared by Playfair and Four-square.

Both work on letter pairs located in 5x5 squares. Playfair uses one square
and special-cases pairs on the same row or column; Four-square always takes
the opposite corners of the rectangle spanned across its squares.
"""
from .polybius_square import from_coordinate, to_coordinate


def _playfair_shift(square, a, b, step):
    r1, c1 = to_coordinate(square, a)
    r2, c2 = to_coordinate(square, b)
    n = square.size
    if r1 == r2:
        return (from_coordinate(square, r1, (c1 + step) % n),
                from_coordinate(square, r2, (c2 + step) % n))
    if c1 == c2:
        return (from_coordinate(square, (r1 + step) % n, c1),
                from_coordinate(square, (r2 + step) % n, c2))
    return from_coordinate(square, r1, c2), from_coordinate(square, r2, c1)


def encrypt_digraph(square, a, b):
    """Same row: step right. Same column: step down. Otherwise swap columns."""
    return _playfair_shift(square, a, b, 1)


def decrypt_digraph(square, a, b):
    return _playfair_shift(square, a, b, -1)


def foursquare_encrypt_digraph(plain, c1, c2, a, b):
    r1, col1 = to_coordinate(plain, a)
    r2, col2 = to_coordinate(plain, b)
    return from_coordinate(c1, r1, col2), from_coordinate(c2, r2, col1)


def foursquare_decrypt_digraph(plain, c1, c2, a, b):
    r1, col1 = to_coordinate(c1, a)
    r2, col2 = to_coordinate(c2, b)
    return from_coordinate(plain, r1, col2), from_coordinate(plain, r2, col1)


def pairs(text):
    return [text[i:i + 2] for i in range(0, len(text), 2)]
