"""OpenSSL salted export container: ``base64(b"Salted__" || salt || ciphertext)``."""

import base64
import binascii
import typing

from .errors import MalformedWireFormat


class WireFormat:
    MAGIC = b"Salted__"
    SALT_LEN = 8
    HEADER_LEN = len(MAGIC) + SALT_LEN

    @staticmethod
    def encode(salt: bytes, ciphertext: bytes) -> str:
        if len(salt) != WireFormat.SALT_LEN:
            raise ValueError(f"Salt must be exactly {WireFormat.SALT_LEN} bytes")
        blob = WireFormat.MAGIC + bytes(salt) + bytes(ciphertext)
        return base64.b64encode(blob).decode("ascii")

    @staticmethod
    def decode(wire: str) -> typing.Tuple[bytes, bytes]:
        if not isinstance(wire, str):
            raise TypeError("WireFormat.decode expects str")
        try:
            # openssl -a wraps at 64 columns; embedded line breaks are not data.
            raw = "".join(wire.split()).encode("ascii")
        except UnicodeEncodeError as exc:
            raise MalformedWireFormat("Wire string is not ASCII") from exc
        try:
            blob = base64.b64decode(raw, validate=True)
        except binascii.Error as exc:
            raise MalformedWireFormat("Wire string is not valid Base64") from exc
        if len(blob) < WireFormat.HEADER_LEN:
            raise MalformedWireFormat("Wire payload truncated")
        if blob[:len(WireFormat.MAGIC)] != WireFormat.MAGIC:
            raise MalformedWireFormat("Wire payload has bad magic")
        salt = blob[len(WireFormat.MAGIC):WireFormat.HEADER_LEN]
        return salt, blob[WireFormat.HEADER_LEN:]


__all__ = ["WireFormat"]
