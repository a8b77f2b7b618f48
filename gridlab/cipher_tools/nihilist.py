# cipher_tools/nihilist.py
"""
Nihilist substitution.

Letters become two-digit Polybius numbers (row and column, both counted
from 1) in a keyed square. The key phrase is turned into numbers the same
way and repeated over the message; each ciphertext number is the plain sum,
with no modulo, so values above 99 are normal.
"""
from .errors import EmptyKeyword, MalformedCiphertext, require_key
from .polybius_square import build_square, clean_text, from_coordinate, to_coordinate


def coordinate_number(square, letter):
    row, col = to_coordinate(square, letter)
    return 10 * (row + 1) + (col + 1)


def number_to_letter(square, number):
    row, col = divmod(number, 10)
    if not (1 <= row <= square.size and 1 <= col <= square.size):
        raise MalformedCiphertext(f"{number} is not a square coordinate")
    return from_coordinate(square, row - 1, col - 1)


def key_numbers(square, key_phrase, count):
    """Key phrase numbers, cycled to ``count`` entries."""
    key = clean_text(key_phrase)
    if not key:
        raise EmptyKeyword("key_phrase has no letters")
    numbers = [coordinate_number(square, ch) for ch in key]
    return [numbers[i % len(numbers)] for i in range(count)]


def _key_phrase(key_phrase):
    phrase = require_key(key_phrase, "key_phrase")
    if not clean_text(phrase):
        raise EmptyKeyword("key_phrase has no letters")
    return phrase


def nihilist_encode(text, square_keyword="", key_phrase=None):
    phrase = _key_phrase(key_phrase)
    square = build_square(square_keyword, 5)
    letters = clean_text(text)
    keys = key_numbers(square, phrase, len(letters))
    return " ".join(
        str(coordinate_number(square, ch) + k) for ch, k in zip(letters, keys)
    )


def nihilist_decode(cipher, square_keyword="", key_phrase=None):
    phrase = _key_phrase(key_phrase)
    square = build_square(square_keyword, 5)
    tokens = (cipher or "").split()
    if not all(tok.isascii() and tok.isdigit() for tok in tokens):
        raise MalformedCiphertext("Nihilist ciphertext must be whitespace separated numbers")
    numbers = [int(tok) for tok in tokens]
    keys = key_numbers(square, phrase, len(numbers))
    return "".join(number_to_letter(square, n - k) for n, k in zip(numbers, keys))
