"""Passphrase configuration for the tilde codec."""

import os
import typing
from dataclasses import dataclass

PASSPHRASE_ENV = "TILDECRYPT_PASSPHRASE"
DEFAULT_PASSPHRASE = "your_shared_secret_key_2024"


def _env_str(name: str) -> typing.Optional[str]:
    value = os.getenv(name)
    if not value:
        return None
    return value


@dataclass(frozen=True)
class CodecConfig:
    """Holds the single passphrase shared by the encrypt and decrypt paths.

    Changing the passphrase makes every previously produced string
    undecryptable; there is no migration between passphrases.
    """

    passphrase: str = DEFAULT_PASSPHRASE

    def __post_init__(self) -> None:
        if not isinstance(self.passphrase, str):
            raise TypeError(f"Unsupported passphrase type: {type(self.passphrase)!r}")
        if self.passphrase == "":
            raise ValueError("Passphrase must not be empty")

    @property
    def passphrase_bytes(self) -> bytes:
        return self.passphrase.encode("utf-8")

    @classmethod
    def from_env(cls) -> "CodecConfig":
        return cls(_env_str(PASSPHRASE_ENV) or DEFAULT_PASSPHRASE)

    @staticmethod
    def resolve_passphrase(passphrase: str) -> str:
        """Treat ``passphrase`` as a file path when one exists, else as literal text."""
        if os.path.isfile(passphrase):
            with open(passphrase, "r", encoding="utf-8") as handle:
                passphrase = handle.read()
            passphrase = passphrase.rstrip("\r\n")
        return passphrase


__all__ = ["CodecConfig", "DEFAULT_PASSPHRASE", "PASSPHRASE_ENV"]
