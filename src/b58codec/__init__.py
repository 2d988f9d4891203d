"""
Base58 encoding and decoding of byte strings.

ed25519 key helpers live in ``b58codec.key_manager`` and need PyNaCl.
"""

from .encoding import ALPHABET, b58decode, b58decode_int, b58encode  # noqa: F401
from .exceptions import Base58Error, InvalidCharacterError, KeyFormatError  # noqa: F401
