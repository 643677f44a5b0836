"""Normalizer: free-form text to a canonical token stream.

Each whitespace-separated word is scanned left to right:
  - a run of digits becomes one spelled-out token per digit
  - a run of letters (any script) becomes one uppercased token
  - any other character becomes its punctuation word, or is dropped

The token stream is space-joined and always ends with the end marker.
"""

from typing import Iterator

from ..core.alphabet import DIGIT_WORDS, END_MARKER, PUNCTUATION


def _upper(letters: str) -> str:
    """Uppercase letter by letter, keeping letters whose uppercase form is
    longer than one character (ß)."""
    chars = []
    for ch in letters:
        up = ch.upper()
        chars.append(up if len(up) == 1 else ch)
    return "".join(chars)


def iter_tokens(text: str) -> Iterator[str]:
    """Yield normalized tokens for text, without the end marker."""
    for word in text.split():
        i = 0
        while i < len(word):
            ch = word[i]

            # Digit run: one word per digit, never one per number
            if ch.isdecimal():
                while i < len(word) and word[i].isdecimal():
                    yield DIGIT_WORDS[int(word[i])]
                    i += 1
                continue

            # Letter run: one token
            if ch.isalpha():
                start = i
                while i < len(word) and word[i].isalpha():
                    i += 1
                yield _upper(word[start:i])
                continue

            # Single character: punctuation word or dropped
            rep = PUNCTUATION.get(ch)
            if rep:
                yield rep
            i += 1


def normalize(text: str) -> str:
    """Normalize text into space-separated uppercase tokens ending in XX.

    Blank input, or input where every character is dropped, returns
    exactly "XX".
    """
    result = " ".join(iter_tokens(text))
    if not result:
        return END_MARKER
    if not result.endswith(END_MARKER):
        result += " " + END_MARKER
    return result
