"""AES-256-CBC with PKCS#7 padding."""

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from .errors import InvalidPadding, MalformedCiphertext

BLOCK_SIZE = 16


class BlockCipherCodec:
    BLOCK_SIZE = BLOCK_SIZE

    @staticmethod
    def encrypt(key: bytes, iv: bytes, plaintext: bytes) -> bytes:
        padder = padding.PKCS7(BLOCK_SIZE * 8).padder()
        padded = padder.update(bytes(plaintext)) + padder.finalize()
        encryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).encryptor()
        return encryptor.update(padded) + encryptor.finalize()

    @staticmethod
    def decrypt(key: bytes, iv: bytes, ciphertext: bytes) -> bytes:
        ciphertext = bytes(ciphertext)
        if not ciphertext or len(ciphertext) % BLOCK_SIZE:
            raise MalformedCiphertext(
                f"Ciphertext length {len(ciphertext)} is not a positive multiple of {BLOCK_SIZE}"
            )
        decryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).decryptor()
        padded = decryptor.update(ciphertext) + decryptor.finalize()
        unpadder = padding.PKCS7(BLOCK_SIZE * 8).unpadder()
        try:
            return unpadder.update(padded) + unpadder.finalize()
        except ValueError as exc:
            raise InvalidPadding("Invalid PKCS#7 padding") from exc


__all__ = ["BlockCipherCodec", "BLOCK_SIZE"]
