"""Key generation from the operating system CSPRNG."""

import secrets

from ..core.alphabet import BASE


def generate_key(length: int) -> list[int]:
    """Return length integers drawn uniformly from [0, BASE).

    Uses secrets.randbelow so every value is equally likely; reducing a
    random byte modulo 100 would favour 0-55.
    """
    if length < 0:
        raise ValueError(f"Key length must be non-negative, got {length}")
    return [secrets.randbelow(BASE) for _ in range(length)]
