"""Round-trip validation for the encryption pipeline.

Verifies:
1. Encoding a normalized message and decoding it gives the expected text
2. Encrypting and decrypting under the same key recovers that text
3. The key is long enough for the encoded message
"""

from typing import Sequence

from . import cipher
from .coder import decode, encode
from .keygen import generate_key
from .normalizer import normalize
from ..core.errors import InsufficientKeyLength


def validate_roundtrip(message: str, key: Sequence[int] | None = None) -> dict:
    """Re-walk the pipeline for message and report every mismatch.

    A key is generated when none is given. A short key is reported in
    errors rather than raised.
    """
    normalized = normalize(message)
    codes = encode(normalized)
    expected = decode(codes).strip()
    if key is None:
        key = generate_key(len(codes))

    errors = []
    recovered = None
    try:
        sealed = cipher.encrypt(codes, key)
        opened = cipher.decrypt(sealed, key)
    except InsufficientKeyLength as exc:
        errors.append(f"  KEY: {exc}")
    else:
        if opened != codes:
            for i, (want, got) in enumerate(zip(codes, opened)):
                if want != got:
                    errors.append(f"  CODE MISMATCH at {i}: expected={want} got={got}")
                    break
        recovered = decode(opened).strip()
        if recovered != expected:
            errors.append(f"  TEXT MISMATCH: expected={expected!r} got={recovered!r}")

    return {
        "passed": len(errors) == 0,
        "normalized": normalized,
        "expected": expected,
        "recovered": recovered,
        "code_count": len(codes),
        "key_length": len(key),
        "errors": errors,
    }
