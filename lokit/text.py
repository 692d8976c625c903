"""String helpers: random strings, substrings, chunks and case conversion."""

from __future__ import annotations

import random
import re
from typing import Sequence

LOWER_CASE_LETTERS_CHARSET = "abcdefghijklmnopqrstuvwxyz"
UPPER_CASE_LETTERS_CHARSET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LETTERS_CHARSET = LOWER_CASE_LETTERS_CHARSET + UPPER_CASE_LETTERS_CHARSET
NUMBERS_CHARSET = "0123456789"
ALPHANUMERIC_CHARSET = LETTERS_CHARSET + NUMBERS_CHARSET
SPECIAL_CHARSET = "!@#$%^&*()_+-=[]{}|;':\",./<>?"
ALL_CHARSET = ALPHANUMERIC_CHARSET + SPECIAL_CHARSET

_SPLIT_WORD = re.compile(
    r"([a-z])([A-Z0-9])|([a-zA-Z])([0-9])|([0-9])([a-zA-Z])|([A-Z])([A-Z])([a-z])"
)
_SPLIT_NUMBER_LETTER = re.compile(r"([0-9])([a-zA-Z])")
_NON_BLANK_RUN = re.compile(r"\S+")


def random_string(size: int, charset: Sequence[str]) -> str:
    """Return ``size`` characters drawn at random from ``charset``."""
    if size <= 0:
        raise ValueError("Size parameter must be greater than 0")
    if len(charset) == 0:
        raise ValueError("Charset parameter must not be empty")
    return "".join(random.choices(list(charset), k=size))


def substring(text: str, offset: int, length: int) -> str:
    """Return up to ``length`` characters from ``offset``; negative offsets count from the end."""
    if length < 0:
        raise ValueError("length must not be negative")
    size = len(text)
    if offset < 0:
        offset = max(size + offset, 0)
    if offset >= size:
        return ""
    return text[offset : offset + length].replace("\x00", "")


def chunk_string(text: str, size: int) -> list[str]:
    """Split ``text`` into pieces of ``size`` characters; the last may be shorter."""
    if size <= 0:
        raise ValueError("Size parameter must be greater than 0")
    if not text:
        return [""]
    return [text[start : start + size] for start in range(0, len(text), size)]


def rune_length(text: str) -> int:
    """Number of characters (code points) in ``text``."""
    return len(text)


def _split_word(match: re.Match[str]) -> str:
    groups = match.groups()
    left = "".join(groups[i] or "" for i in (0, 2, 4, 6))
    right = "".join(groups[i] or "" for i in (1, 3, 5, 7, 8))
    return f"{left} {right}"


def words(text: str) -> list[str]:
    """Split ``text`` into its words, breaking at case changes, digits and punctuation."""
    text = _SPLIT_WORD.sub(_split_word, text)
    text = _SPLIT_NUMBER_LETTER.sub(r"\1 \2", text)
    cleaned = "".join(ch if ch.isalpha() or ch.isdecimal() else " " for ch in text)
    return cleaned.split()


def capitalize(text: str) -> str:
    """Upper-case the first letter of each word and lower-case the rest."""
    return _NON_BLANK_RUN.sub(lambda m: m.group().capitalize(), text)


def pascal_case(text: str) -> str:
    """Convert ``text`` to PascalCase."""
    return "".join(capitalize(word) for word in words(text))


def camel_case(text: str) -> str:
    """Convert ``text`` to camelCase."""
    items = words(text)
    if not items:
        return ""
    first, *rest = items
    return first.lower() + "".join(capitalize(word.lower()) for word in rest)


def kebab_case(text: str) -> str:
    """Convert ``text`` to kebab-case."""
    return "-".join(word.lower() for word in words(text))


def snake_case(text: str) -> str:
    """Convert ``text`` to snake_case."""
    return "_".join(word.lower() for word in words(text))


def ellipsis(text: str, length: int) -> str:
    """Trim ``text`` and truncate it to ``length`` characters ending in an ellipsis."""
    text = text.strip()
    if len(text) > length:
        if len(text) < 3 or length < 3:
            return "..."
        return text[: length - 3].strip() + "..."
    return text