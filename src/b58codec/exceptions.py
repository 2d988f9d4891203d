class Base58Error(ValueError):
    """Base class for b58codec errors."""


class InvalidCharacterError(Base58Error):
    """Raised when a string contains a character outside the base58 alphabet."""

    def __init__(self, character: str, position: int):
        super().__init__(
            f"Invalid base58 character {character!r} at position {position}"
        )
        self.character = character
        self.position = position


class KeyFormatError(Base58Error):
    """Raised when base58 key material cannot be turned into an ed25519 key."""
