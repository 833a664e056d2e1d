"""Failure taxonomy for the tilde codec.

Every error subclasses ``ValueError`` so callers that already guard codec
calls with ``except ValueError`` keep working.
"""


class CodecError(ValueError):
    """Base class for the expected, routine decode/decrypt failures."""


class MalformedWireFormat(CodecError):
    """Bad Base64, a truncated container or a wrong magic prefix."""


class MalformedCiphertext(CodecError):
    """Ciphertext is empty or not aligned to the cipher block size."""


class InvalidPadding(CodecError):
    """Decryption finished but the PKCS#7 padding is inconsistent."""


class InvalidUtf8(CodecError):
    """Decrypted bytes are not valid UTF-8 text."""


__all__ = [
    "CodecError",
    "MalformedWireFormat",
    "MalformedCiphertext",
    "InvalidPadding",
    "InvalidUtf8",
]
