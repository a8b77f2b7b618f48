# cipher_tools/errors.py
"""
Exceptions raised by the cipher engine.

Key and table problems are caught while the keys and squares are built,
before any text is transformed. The web layer turns them into 400
responses using the ``code`` attribute.
"""


class CipherError(ValueError):
    code = "cipher_error"


class EmptyKeyword(CipherError):
    """A required keyword, key phrase or transposition key is blank."""
    code = "empty_keyword"


class InvalidKeyLength(CipherError):
    """A key has the wrong shape (e.g. checkerboard escape digits)."""
    code = "invalid_key_length"


class MalformedCiphertext(CipherError):
    """Decode input holds symbols outside the label/digit alphabet."""
    code = "malformed_ciphertext"


class AmbiguousReverseMapping(CipherError):
    """Two letters share a homophone code."""
    code = "ambiguous_reverse_mapping"


class DivisionByZeroKey(CipherError):
    """Transposition keyword has no letters left after cleaning."""
    code = "division_by_zero_key"


class SymbolNotInSquare(CipherError):
    code = "symbol_not_in_square"


class MalformedMapping(CipherError):
    code = "malformed_mapping"


class UnknownCipher(CipherError):
    code = "unknown_cipher"


def require_key(value, name):
    """Return ``value`` as a string, raising EmptyKeyword when it is blank."""
    if value is None or not str(value).strip():
        raise EmptyKeyword(f"{name} is required")
    return str(value)
