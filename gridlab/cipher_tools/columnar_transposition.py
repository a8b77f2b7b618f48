# cipher_tools/columnar_transposition.py
import logging
import string
from dataclasses import dataclass
from typing import Tuple

from .errors import DivisionByZeroKey, MalformedCiphertext, require_key
from .polybius_square import clean_ciphertext, clean_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeyOrder:
    """
    ranks[c]   -> rank of original column c
    columns[r] -> original column read at rank r
    """
    ranks: Tuple[int, ...]
    columns: Tuple[int, ...]

    def __len__(self):
        return len(self.columns)


def compute_key_order(keyword) -> KeyOrder:
    """
    Rank the keyword's letters alphabetically. sorted() is stable, so
    repeated letters keep their left-to-right order.
    """
    key = clean_text(keyword, merge_j=False)
    if not key:
        raise DivisionByZeroKey("transposition keyword has no letters")
    columns = tuple(sorted(range(len(key)), key=lambda k: key[k]))
    ranks = [0] * len(key)
    for rank, col in enumerate(columns):
        ranks[col] = rank
    logger.debug("key order for %d columns: %s", len(key), columns)
    return KeyOrder(tuple(ranks), columns)


def column_lengths(length, order: KeyOrder):
    """Cells per original column when ``length`` symbols are written row by row."""
    n = len(order)
    base, extra = divmod(length, n)
    return [base + 1 if col < extra else base for col in range(n)]


def apply_transposition(stream, order: KeyOrder):
    n = len(order)
    columns = [""] * n
    for i, ch in enumerate(stream):
        columns[i % n] += ch
    return "".join(columns[col] for col in order.columns)


def invert_transposition(stream, order: KeyOrder, length=None):
    if length is None:
        length = len(stream)
    if length != len(stream):
        raise MalformedCiphertext(f"expected {length} symbols, got {len(stream)}")

    lengths = column_lengths(length, order)
    columns = [""] * len(order)
    index = 0
    for col in order.columns:
        columns[col] = stream[index:index + lengths[col]]
        index += lengths[col]

    rows = lengths[0] if lengths else 0
    out = []
    for r in range(rows):
        for column in columns:
            if r < len(column):
                out.append(column[r])
    return "".join(out)


# ==============================
#  COLUMNAR TRANSPOSITION
# ==============================
def columnar_encode(text, trans_keyword):
    order = compute_key_order(require_key(trans_keyword, "trans_keyword"))
    return apply_transposition(clean_text(text, merge_j=False), order)


def columnar_decode(cipher, trans_keyword):
    order = compute_key_order(require_key(trans_keyword, "trans_keyword"))
    return invert_transposition(clean_ciphertext(cipher, string.ascii_uppercase), order)
