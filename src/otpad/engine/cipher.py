"""Cipher engine: modular addition and subtraction of a key.

Only a prefix of the key is consumed; the one check performed is that
the key is long enough.
"""

from typing import Sequence

from ..core.alphabet import BASE
from ..core.errors import InsufficientKeyLength


def _check_key(values: Sequence[int], key: Sequence[int]) -> None:
    if len(key) < len(values):
        raise InsufficientKeyLength(len(values), len(key))


def encrypt(codes: Sequence[int], key: Sequence[int]) -> list[int]:
    """cipher[i] = (codes[i] + key[i]) mod 100."""
    _check_key(codes, key)
    return [(c + k) % BASE for c, k in zip(codes, key)]


def decrypt(cipher: Sequence[int], key: Sequence[int]) -> list[int]:
    """codes[i] = (cipher[i] - key[i] + 100) mod 100."""
    _check_key(cipher, key)
    return [(c - k + BASE) % BASE for c, k in zip(cipher, key)]
