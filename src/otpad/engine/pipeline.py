"""Message-level encryption and decryption.

Ties the stages together:
    text -> normalize -> encode -> cipher.encrypt -> cipher groups
    cipher groups -> cipher.decrypt -> decode -> text
"""

from dataclasses import dataclass
from typing import Sequence

from . import cipher
from .coder import decode, encode
from .keygen import generate_key
from .normalizer import normalize


@dataclass(frozen=True)
class SealedMessage:
    """Everything produced when a message is encrypted under a fresh key."""
    normalized: str
    codes: tuple[int, ...]
    key: tuple[int, ...]
    cipher: tuple[int, ...]


def encrypt(message: str, key: Sequence[int]) -> list[int]:
    """Normalize, encode and encrypt a plaintext message.

    Raises InsufficientKeyLength if key is shorter than the encoded message.
    """
    return cipher.encrypt(encode(normalize(message)), key)


def decrypt(cipher_codes: Sequence[int], key: Sequence[int]) -> str:
    """Decrypt cipher codes and decode them to text.

    Word boundaries come back as single spaces; the result is stripped.
    """
    return decode(cipher.decrypt(cipher_codes, key)).strip()


def seal(message: str) -> SealedMessage:
    """Encrypt a message under a freshly generated key of exactly its length."""
    normalized = normalize(message)
    codes = encode(normalized)
    key = generate_key(len(codes))
    return SealedMessage(
        normalized=normalized,
        codes=tuple(codes),
        key=tuple(key),
        cipher=tuple(cipher.encrypt(codes, key)),
    )
