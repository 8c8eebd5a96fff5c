"""
Module: titlecase.predicates

Purpose:
    Character-class predicates for word classification. All checks are
    Unicode-aware: letters are any character in a Unicode letter category,
    uppercase means category Lu.

Key Functions:
    - letters_only(): Concatenated letters of a word
    - is_all_uppercase(): True for acronyms such as "NASA" or "U.S."
    - has_internal_capital(): True for "iPhone", "DeLorean"
    - starts_with_digit(): True for "3rd", "24K"
    - title_word(): Lowercase a word, then uppercase its first character

Dependencies:
    - unicodedata (std): Letter categories

Used By:
    - titlecase.tokenizer: Token derived properties
    - titlecase.rules: Rule predicates and transforms
"""

from __future__ import annotations

import unicodedata

UPPERCASE_CATEGORY = "Lu"


def is_letter(char: str) -> bool:
    """Return True when char is in any Unicode letter category (L*)."""
    return unicodedata.category(char).startswith("L")


def letters_only(word: str) -> str:
    """Return the letters of word with everything else dropped."""
    return "".join(char for char in word if is_letter(char))


def is_all_uppercase(word: str) -> bool:
    """
    Check whether every letter in word is uppercase.

    Non-letter characters are ignored, so "U.S." and "NASA" both qualify.
    A word with no letters at all is never considered uppercase.

    Example:
        >>> is_all_uppercase("U.S.")
        True
        >>> is_all_uppercase("2024")
        False
    """
    letters = letters_only(word)
    if not letters:
        return False
    return letters == letters.upper()


def has_internal_capital(word: str) -> bool:
    """Return True when an uppercase letter appears after the first character."""
    return any(unicodedata.category(char) == UPPERCASE_CATEGORY for char in word[1:])


def starts_with_digit(word: str) -> bool:
    return word[:1].isdigit() and word[:1].isascii()


def title_word(word: str) -> str:
    """
    Lowercase word and uppercase its first character.

    Example:
        >>> title_word("sATELLITE")
        'Satellite'
    """
    lowered = word.lower()
    return lowered[:1].upper() + lowered[1:]
