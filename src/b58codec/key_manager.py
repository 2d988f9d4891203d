import getpass
import logging
from dataclasses import dataclass
from typing import Optional

from nacl import exceptions as nacl_exceptions
from nacl.signing import SigningKey

from .encoding import b58decode, b58encode
from .exceptions import InvalidCharacterError, KeyFormatError

logger = logging.getLogger(__name__)

SEED_LENGTH = 32
PUBLIC_KEY_LENGTH = 32


def decode_public_key(address: str) -> bytes:
    """Decode a base58 ed25519 public key (address) to its 32 raw bytes."""
    try:
        public_key = b58decode(address)
    except InvalidCharacterError as exc:
        raise KeyFormatError(f"Address is not valid base58: {exc}") from exc
    if len(public_key) != PUBLIC_KEY_LENGTH:
        raise KeyFormatError(
            f"Unsupported public key length {len(public_key)}. Expected {PUBLIC_KEY_LENGTH} bytes."
        )
    return public_key


@dataclass
class KeyMaterial:
    signing_key: SigningKey

    @property
    def public_key_b58(self) -> str:
        return b58encode(bytes(self.signing_key.verify_key))

    @property
    def secret_key_bytes(self) -> bytes:
        return bytes(self.signing_key)

    @property
    def secret_key_64(self) -> bytes:
        verify_key_bytes = bytes(self.signing_key.verify_key)
        return self.secret_key_bytes + verify_key_bytes

    @property
    def secret_key_b58(self) -> str:
        return b58encode(self.secret_key_64)


class KeyManager:
    def __init__(self) -> None:
        self._key_material: Optional[KeyMaterial] = None

    def generate(self) -> KeyMaterial:
        key_material = KeyMaterial(signing_key=SigningKey.generate())
        self._key_material = key_material
        logger.info("Generated ed25519 key public_key=%s", key_material.public_key_b58)
        return key_material

    def load_from_prompt(self) -> KeyMaterial:
        secret_input = getpass.getpass(
            prompt="Enter ed25519 private key (base58, kept only in RAM): "
        ).strip()
        if not secret_input:
            raise KeyFormatError("Private key input is empty.")
        return self.load_from_base58(secret_input)

    def load_from_base58(self, secret_b58: str) -> KeyMaterial:
        try:
            secret_bytes = b58decode(secret_b58)
        except InvalidCharacterError as exc:
            raise KeyFormatError(f"Private key is not valid base58: {exc}") from exc

        if len(secret_bytes) not in (SEED_LENGTH, SEED_LENGTH + PUBLIC_KEY_LENGTH):
            raise KeyFormatError(
                "Unsupported private key length. Expected 32 or 64 bytes after base58 decoding."
            )

        seed = secret_bytes[:SEED_LENGTH]
        try:
            signing_key = SigningKey(seed)
        except nacl_exceptions.CryptoError as exc:
            raise KeyFormatError("Failed to construct signing key from provided secret.") from exc

        # 64-byte secrets carry the public key after the seed.
        embedded_public_key = secret_bytes[SEED_LENGTH:]
        if embedded_public_key and embedded_public_key != bytes(signing_key.verify_key):
            raise KeyFormatError("Public key half of the 64-byte secret does not match its seed.")

        key_material = KeyMaterial(signing_key=signing_key)
        self._key_material = key_material
        logger.debug("Loaded ed25519 key public_key=%s", key_material.public_key_b58)
        return key_material

    @property
    def key_material(self) -> KeyMaterial:
        if not self._key_material:
            raise RuntimeError("Private key has not been loaded.")
        return self._key_material
