"""Legacy OpenSSL ``EVP_BytesToKey`` derivation (MD5, single iteration).

This is deliberately weak: there is no work factor, so a captured string can
be brute-forced cheaply. It is kept byte-for-byte because the salted export
container produced by ``openssl enc`` and CryptoJS depends on it.
"""

import typing

from cryptography.hazmat.primitives import hashes

KEY_LEN = 32
IV_LEN = 16


class KeyMaterial(typing.NamedTuple):
    key: bytes
    iv: bytes


class KeyMaterialDeriver:
    KEY_LEN = KEY_LEN
    IV_LEN = IV_LEN

    @staticmethod
    def _coerce_bytes(value: typing.Union[str, bytes, bytearray, memoryview]) -> bytes:
        if isinstance(value, str):
            return value.encode("utf-8")
        if isinstance(value, (bytes, bytearray, memoryview)):
            return bytes(value)
        raise TypeError(f"Unsupported key material input type: {type(value)!r}")

    @staticmethod
    def _md5(data: bytes) -> bytes:
        digest = hashes.Hash(hashes.MD5())
        digest.update(data)
        return digest.finalize()

    @staticmethod
    def derive(
        passphrase: typing.Union[str, bytes, bytearray, memoryview],
        salt: typing.Union[bytes, bytearray, memoryview]
    ) -> KeyMaterial:
        pw = KeyMaterialDeriver._coerce_bytes(passphrase)
        salt_bytes = KeyMaterialDeriver._coerce_bytes(salt)
        needed = KeyMaterialDeriver.KEY_LEN + KeyMaterialDeriver.IV_LEN
        out = bytearray()
        block = b""
        while len(out) < needed:
            block = KeyMaterialDeriver._md5(block + pw + salt_bytes)
            out.extend(block)
        key = bytes(out[:KeyMaterialDeriver.KEY_LEN])
        iv = bytes(out[KeyMaterialDeriver.KEY_LEN:needed])
        return KeyMaterial(key, iv)


__all__ = ["KeyMaterial", "KeyMaterialDeriver", "KEY_LEN", "IV_LEN"]
