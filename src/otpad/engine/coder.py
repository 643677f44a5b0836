"""Coder: normalized text <-> integer code sequence.

Encode never fails: characters outside both alphabets are skipped.
Decode never fails: codes outside the alphabet become a placeholder.
"""

from typing import Sequence

from ..core.alphabet import CHAR_TO_CODE, PLACEHOLDER, SEPARATOR, SYMBOL_TABLE


def encode(normalized: str) -> list[int]:
    """Encode normalized text as letter codes with 0 between words."""
    codes = []
    words = [w for w in normalized.split(" ") if w]

    for n, word in enumerate(words):
        for ch in word:
            code = CHAR_TO_CODE.get(ch.upper())
            if code is not None:
                codes.append(code)
        if n < len(words) - 1:
            codes.append(SEPARATOR)

    return codes


def decode(codes: Sequence[int]) -> str:
    """Decode codes back into a raw letter stream.

    Separators become spaces; no trimming is applied.
    """
    chars = []
    for code in codes:
        if 0 <= code < len(SYMBOL_TABLE):
            chars.append(SYMBOL_TABLE[code].char)
        else:
            chars.append(PLACEHOLDER)
    return "".join(chars)
