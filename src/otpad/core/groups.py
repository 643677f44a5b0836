"""Two-digit group text format for keys and ciphertexts.

Each value is written as two zero-padded decimal digits, groups are
separated by single spaces: [7, 42, 19] <-> "07 42 19".
"""

import re
from typing import Sequence

from .errors import ParseError


# Optional sign and ASCII digits only: no underscores, no other scripts
_GROUP_PATTERN = re.compile(r"[+-]?[0-9]+")


def format_codes(values: Sequence[int]) -> str:
    """Render integers as space-separated two-digit groups."""
    return " ".join(f"{v:02d}" for v in values)


def parse_codes(text: str) -> list[int]:
    """Parse whitespace-separated groups back into integers.

    Any whitespace separates groups, so multi-line input is accepted.
    Raises ParseError on the first token that is not an integer.
    """
    values = []
    for position, token in enumerate(text.split()):
        if not _GROUP_PATTERN.fullmatch(token):
            raise ParseError(token, position)
        values.append(int(token))
    return values
