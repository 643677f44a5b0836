"""Alphabet table: letter codes, digit words and punctuation words.

Two letter alphabets share one numeric code space. Latin takes codes
1-26, Cyrillic takes 27-59. Code 0 separates words. Every other value
up to the modulus decodes to a placeholder.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType


LATIN = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
CYRILLIC = "АБВГДЕЁЖЗИЙКЛМНОПРСТУФХЦЧШЩЪЫЬЭЮЯ"

SEPARATOR = 0
MAX_CODE = len(LATIN) + len(CYRILLIC)  # 59
BASE = 100  # cipher modulus, also the two-digit group range

END_MARKER = "XX"
PLACEHOLDER = "?"

DIGIT_WORDS = (
    "ZERO", "ONE", "TWO", "THREE", "FOUR",
    "FIVE", "SIX", "SEVEN", "EIGHT", "NINE",
)

# "." maps to a single X; a run of them can collide with END_MARKER.
PUNCTUATION = MappingProxyType({
    ",": "COMMA", ".": "X", "!": "EXCLAMATION", "?": "QUESTION",
    ";": "SEMICOLON", ":": "COLON", "-": "DASH", "—": "DASH",
    "(": "LEFTBRACKET", ")": "RIGHTBRACKET",
    "[": "LEFTSQUARE", "]": "RIGHTSQUARE",
    "{": "LEFTCURLY", "}": "RIGHTCURLY",
    "'": "QUOTE", '"': "QUOTE", "…": "ELLIPSIS",
})


class SymbolClass(Enum):
    SEPARATOR = "separator"
    LATIN = "latin"
    CYRILLIC = "cyrillic"
    INVALID = "invalid"


@dataclass(frozen=True)
class Symbol:
    code: int
    symbol_class: SymbolClass
    char: str


def classify_code(code: int) -> Symbol:
    """Classify a single numeric code."""
    if code == SEPARATOR:
        return Symbol(code, SymbolClass.SEPARATOR, " ")
    if 1 <= code <= len(LATIN):
        return Symbol(code, SymbolClass.LATIN, LATIN[code - 1])
    if len(LATIN) < code <= MAX_CODE:
        return Symbol(code, SymbolClass.CYRILLIC, CYRILLIC[code - len(LATIN) - 1])
    return Symbol(code, SymbolClass.INVALID, PLACEHOLDER)


def _build_char_to_code():
    table = {}
    # Latin first: on a shared character the first alphabet wins
    for offset, alphabet in ((0, LATIN), (len(LATIN), CYRILLIC)):
        for i, ch in enumerate(alphabet):
            table.setdefault(ch, offset + i + 1)
    return MappingProxyType(table)


# Build the complete tables
SYMBOL_TABLE = tuple(classify_code(v) for v in range(BASE))
CHAR_TO_CODE = _build_char_to_code()