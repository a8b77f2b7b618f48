# cipher_tools/porta.py
import string

from .errors import EmptyKeyword, require_key
from .polybius_square import clean_ciphertext, clean_text

# One row per key letter pair. Each row swaps the A-M half with the N-Z
# half, so applying a row twice gives the original letter back.
PORTA_TABLE = (
    "NOPQRSTUVWXYZABCDEFGHIJKLM",  # A B
    "OPQRSTUVWXYZNMABCDEFGHIJKL",  # C D
    "PQRSTUVWXYZNOLMABCDEFGHIJK",  # E F
    "QRSTUVWXYZNOPKLMABCDEFGHIJ",  # G H
    "RSTUVWXYZNOPQJKLMABCDEFGHI",  # I J
    "STUVWXYZNOPQRIJKLMABCDEFGH",  # K L
    "TUVWXYZNOPQRSHIJKLMABCDEFG",  # M N
    "UVWXYZNOPQRSTGHIJKLMABCDEF",  # O P
    "VWXYZNOPQRSTUFGHIJKLMABCDE",  # Q R
    "WXYZNOPQRSTUVEFGHIJKLMABCD",  # S T
    "XYZNOPQRSTUVWDEFGHIJKLMABC",  # U V
    "YZNOPQRSTUVWXCDEFGHIJKLMAB",  # W X
    "ZNOPQRSTUVWXYBCDEFGHIJKLMA",  # Y Z
)


def row_for(key_letter):
    return PORTA_TABLE[(ord(key_letter) - ord("A")) // 2]


def _porta(letters, key):
    key = clean_text(require_key(key, "key"), merge_j=False)
    if not key:
        raise EmptyKeyword("key has no letters")
    return "".join(
        row_for(key[i % len(key)])[ord(ch) - ord("A")]
        for i, ch in enumerate(letters)
    )


def porta_encode(text, key):
    return _porta(clean_text(text, merge_j=False), key)


def porta_decode(cipher, key):
    """Porta is reciprocal: decoding runs the same table lookups."""
    return _porta(clean_ciphertext(cipher, string.ascii_uppercase), key)
