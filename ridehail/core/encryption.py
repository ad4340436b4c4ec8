"""
Field encryption for sensitive identifiers stored at rest.

Uses AES-256-CBC from the ``cryptography`` library with a random IV per
value. Stored format is ``"<ciphertext hex>:<iv hex>"`` so every value can be
decrypted on its own.
"""
import hashlib
import hmac
import os
from typing import Optional

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from ridehail.core.config import Settings

DELIMITER = ":"
IV_LENGTH = 16
KEY_LENGTH = 32

FULL_MASK = "XXXX XXXX XXXX"
NATIONAL_ID_LENGTH = 12


def mask_national_id(national_id: Optional[str]) -> str:
    """Mask a 12-digit national ID as ``XXXX XXXX <last4>``.

    Anything that is not exactly 12 characters is fully masked.
    """
    if not national_id or len(national_id) != NATIONAL_ID_LENGTH:
        return FULL_MASK
    return f"XXXX XXXX {national_id[-4:]}"


class FieldCipher:
    """Symmetric cipher for single column values."""

    def __init__(self, key: str):
        key_bytes = key.encode("utf-8")[:KEY_LENGTH]
        if len(key_bytes) != KEY_LENGTH:
            raise ValueError(f"Encryption key must be at least {KEY_LENGTH} bytes")
        self._key = key_bytes

    @classmethod
    def from_settings(cls, settings: Settings) -> "FieldCipher":
        return cls(settings.encryption_key)

    @staticmethod
    def is_encrypted(value: str) -> bool:
        """Plaintext identifiers never contain the delimiter."""
        return DELIMITER in value

    def encrypt(self, plaintext: str) -> str:
        iv = os.urandom(IV_LENGTH)
        padder = padding.PKCS7(algorithms.AES.block_size).padder()
        padded = padder.update(plaintext.encode("utf-8")) + padder.finalize()

        encryptor = Cipher(algorithms.AES(self._key), modes.CBC(iv)).encryptor()
        ciphertext = encryptor.update(padded) + encryptor.finalize()
        return f"{ciphertext.hex()}{DELIMITER}{iv.hex()}"

    def encrypt_if_needed(self, value: str) -> str:
        """Encrypt unless the value is already in stored form."""
        if self.is_encrypted(value):
            return value
        return self.encrypt(value)

    def decrypt(self, stored: str) -> str:
        """Decrypt a value produced by :meth:`encrypt`.

        Raises:
            ValueError: If the value is malformed or was encrypted with another key
        """
        ciphertext_hex, sep, iv_hex = stored.partition(DELIMITER)
        if not sep:
            raise ValueError("Value is not in encrypted form")

        ciphertext = bytes.fromhex(ciphertext_hex)
        iv = bytes.fromhex(iv_hex)
        if len(iv) != IV_LENGTH:
            raise ValueError("Invalid initialization vector")

        decryptor = Cipher(algorithms.AES(self._key), modes.CBC(iv)).decryptor()
        padded = decryptor.update(ciphertext) + decryptor.finalize()

        unpadder = padding.PKCS7(algorithms.AES.block_size).unpadder()
        plaintext = unpadder.update(padded) + unpadder.finalize()
        return plaintext.decode("utf-8")

    def digest(self, value: str) -> str:
        """Keyed SHA-256 digest used for unique lookups of encrypted values."""
        return hmac.new(self._key, value.encode("utf-8"), hashlib.sha256).hexdigest()

    def masked(self, stored: Optional[str]) -> str:
        """Decrypt a stored national ID and return its masked form."""
        if not stored:
            return FULL_MASK
        return mask_national_id(self.decrypt(stored))
