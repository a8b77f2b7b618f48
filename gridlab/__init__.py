"""Classical square and transposition ciphers, with a small JSON web API."""

__version__ = "0.1.0"
