"""
Module: titlecase.tokenizer

Purpose:
    Lossless word/separator split of free-form text and its inverse.
    Words are ordinals ("3rd", "24K"), letter runs with at most one
    internal apostrophe ("don't", "McDonald's") and bare digit runs.
    Everything between words is kept verbatim as separators, so
    interleaving the two sequences reproduces the input exactly.

Key Functions:
    - parse_text(): Split text into word tokens and separators
    - reassemble_text(): Interleave words and separators back into text

Key Classes:
    - Token: Immutable word token with derived casing properties
    - ParsedText: Word tokens plus separators

Dependencies:
    - regex: Unicode letter-category matching (\p{L})

Used By:
    - titlecase.engine: ap_style_title_case()
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, NamedTuple, Sequence, Tuple

import regex

from title_link_copy.titlecase.predicates import (
    has_internal_capital,
    is_all_uppercase,
    starts_with_digit,
)
from title_link_copy.titlecase.suffix import split_suffix

LETTER = r"\p{L}"
DIGIT = r"[0-9]"
APOSTROPHES = "'’"

# Alternatives are ordered most specific first.
WORD_PATTERN = regex.compile(
    rf"{DIGIT}+{LETTER}+"
    rf"|{LETTER}+(?:[{APOSTROPHES}]{LETTER}+)?"
    rf"|{DIGIT}+"
)


@dataclass(frozen=True)
class Token:
    """
    Word token parsed from a title.

    Tokens are positional: they only carry meaning within the sequence
    they were parsed from.

    Attributes:
        text: The matched substring.
        start: Offset of the match in the source text.

    Example:
        >>> token = Token("NASA's", 0)
        >>> token.base, token.suffix
        ('NASA', "'s")
        >>> token.is_all_uppercase
        True
    """
    text: str
    start: int = 0

    @property
    def end(self) -> int:
        return self.start + len(self.text)

    @property
    def base(self) -> str:
        return split_suffix(self.text)[0]

    @property
    def suffix(self) -> str:
        return split_suffix(self.text)[1]

    @property
    def is_all_uppercase(self) -> bool:
        return is_all_uppercase(self.base)

    @property
    def has_internal_capital(self) -> bool:
        return has_internal_capital(self.base)

    @property
    def starts_with_digit(self) -> bool:
        return starts_with_digit(self.base)


class ParsedText(NamedTuple):
    """Word tokens and the separators around them (one more separator than words)."""
    words: Tuple[Token, ...]
    separators: Tuple[str, ...]


def parse_text(text: str) -> ParsedText:
    """
    Split text into word tokens and literal separators.

    Separators hold everything the word pattern does not match:
    whitespace, punctuation, symbols. There is always exactly one more
    separator than there are words; leading and trailing separators may
    be empty strings.

    Args:
        text: Any string, including "" or text without letters/digits.

    Returns:
        ParsedText(words, separators).

    Example:
        >>> parsed = parse_text("Hello, world!")
        >>> [w.text for w in parsed.words]
        ['Hello', 'world']
        >>> parsed.separators
        ('', ', ', '!')
    """
    words: List[Token] = []
    separators: List[str] = []
    position = 0

    for match in WORD_PATTERN.finditer(text):
        separators.append(text[position:match.start()])
        words.append(Token(match.group(0), match.start()))
        position = match.end()

    separators.append(text[position:])
    return ParsedText(tuple(words), tuple(separators))


def reassemble_text(words: Sequence[str], separators: Sequence[str]) -> str:
    """
    Interleave separators and words by index.

    Emits separators[i] then words[i] for every index up to the longer
    sequence, skipping whichever sequence is exhausted. This is the exact
    inverse of parse_text() when no word is changed.

    Args:
        words: Word strings (possibly recased).
        separators: Separators from parse_text().

    Returns:
        The reassembled text.
    """
    parts: List[str] = []
    for i in range(max(len(words), len(separators))):
        if i < len(separators):
            parts.append(separators[i])
        if i < len(words):
            parts.append(words[i])
    return "".join(parts)
