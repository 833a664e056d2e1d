"""Sentinel-driven encrypt/decrypt selection.

A string beginning with ``~`` claims to be ciphertext. The claim is checked by
actually decrypting it; when any step fails the whole input, marker included,
is encrypted instead, so every string is a valid input and ``process`` never
reports an error.
"""

import enum
import os
import typing

from .cipher import BlockCipherCodec
from .config import CodecConfig
from .errors import CodecError, InvalidUtf8
from .kdf import KeyMaterialDeriver
from .wire import WireFormat

MARKER = "~"


class Mode(str, enum.Enum):
    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"


class ProcessResult(typing.NamedTuple):
    result: str
    mode: Mode

    def to_dict(self) -> typing.Dict[str, str]:
        return {"result": self.result, "mode": self.mode.value}


class DecryptAttempt(typing.NamedTuple):
    plaintext: typing.Optional[str]
    failure: typing.Optional[CodecError] = None

    @property
    def ok(self) -> bool:
        return self.failure is None


class TextProcessor:
    MARKER = MARKER

    def __init__(self, config: typing.Optional[CodecConfig] = None) -> None:
        self.config = config if config is not None else CodecConfig.from_env()

    def _new_salt(self) -> bytes:
        # OSError from the OS random source is a hard failure and propagates.
        return os.urandom(WireFormat.SALT_LEN)

    def _decrypt_wire(self, wire: str) -> str:
        salt, ciphertext = WireFormat.decode(wire)
        material = KeyMaterialDeriver.derive(self.config.passphrase_bytes, salt)
        plain = BlockCipherCodec.decrypt(material.key, material.iv, ciphertext)
        try:
            return plain.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidUtf8("Decrypted bytes are not valid UTF-8") from exc

    def try_decrypt(self, wire: str) -> DecryptAttempt:
        """Decrypt ``wire`` (no marker), reporting expected failures as data."""
        try:
            return DecryptAttempt(self._decrypt_wire(wire))
        except CodecError as exc:
            return DecryptAttempt(None, exc)

    def encrypt_text(self, text: str) -> str:
        if not isinstance(text, str):
            raise TypeError("encrypt_text expects str")
        salt = self._new_salt()
        material = KeyMaterialDeriver.derive(self.config.passphrase_bytes, salt)
        ciphertext = BlockCipherCodec.encrypt(material.key, material.iv, text.encode("utf-8"))
        return MARKER + WireFormat.encode(salt, ciphertext)

    def decrypt_text(self, token: str) -> str:
        """Decrypt a ``~``-prefixed (or bare) wire string, raising on failure."""
        if not isinstance(token, str):
            raise TypeError("decrypt_text expects str")
        if token.startswith(MARKER):
            token = token[len(MARKER):]
        return self._decrypt_wire(token)

    def process(self, text: str) -> ProcessResult:
        if not isinstance(text, str):
            raise TypeError("process expects str")
        if not text.strip():
            return ProcessResult("", Mode.ENCRYPT)
        if text.startswith(MARKER):
            attempt = self.try_decrypt(text[len(MARKER):])
            if attempt.ok and attempt.plaintext:
                return ProcessResult(attempt.plaintext, Mode.DECRYPT)
            # Failed or empty decrypts fall through: the input is plaintext after all.
        return ProcessResult(self.encrypt_text(text), Mode.ENCRYPT)


__all__ = ["DecryptAttempt", "MARKER", "Mode", "ProcessResult", "TextProcessor"]
