"""
TILDECRYPT - single-field text encrypt/decrypt codec

Any string goes in. Strings that start with ``~`` and decrypt cleanly come
back as plaintext; everything else comes back encrypted as
``"~" + base64(b"Salted__" + salt + ciphertext)`` (AES-256-CBC, OpenSSL
``EVP_BytesToKey`` key derivation).
"""

from .cipher import BlockCipherCodec
from .config import CodecConfig, DEFAULT_PASSPHRASE, PASSPHRASE_ENV
from .errors import (
    CodecError,
    InvalidPadding,
    InvalidUtf8,
    MalformedCiphertext,
    MalformedWireFormat,
)
from .kdf import KeyMaterial, KeyMaterialDeriver
from .processor import MARKER, DecryptAttempt, Mode, ProcessResult, TextProcessor
from .version import __version__
from .wire import WireFormat

# ============================================================================
# TEXT FUNCTIONS (passphrase from TILDECRYPT_PASSPHRASE or the default)
# ============================================================================

def process(text: str) -> ProcessResult:
    """
    Encrypt or decrypt ``text``, whichever its content calls for.

    Returns:
        ProcessResult(result, mode) where mode is Mode.ENCRYPT or Mode.DECRYPT

    Note:
        - Never raises for str input; undecryptable '~' strings are encrypted
        - Empty or whitespace-only input yields ("", Mode.ENCRYPT)
    """
    return TextProcessor().process(text)


def encrypt_text(text: str) -> str:
    return TextProcessor().encrypt_text(text)


def decrypt_text(token: str) -> str:
    return TextProcessor().decrypt_text(token)


__all__ = [
    "BlockCipherCodec",
    "CodecConfig",
    "CodecError",
    "DEFAULT_PASSPHRASE",
    "DecryptAttempt",
    "InvalidPadding",
    "InvalidUtf8",
    "KeyMaterial",
    "KeyMaterialDeriver",
    "MARKER",
    "MalformedCiphertext",
    "MalformedWireFormat",
    "Mode",
    "PASSPHRASE_ENV",
    "ProcessResult",
    "TextProcessor",
    "WireFormat",
    "__version__",
    "decrypt_text",
    "encrypt_text",
    "process",
]
