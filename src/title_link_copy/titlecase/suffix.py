"""
Module: titlecase.suffix

Purpose:
    Possessive suffix splitting. Separates a trailing 's (straight or curly
    apostrophe) from its base so the base can be classified on its own and
    the suffix recased independently.

Key Functions:
    - split_suffix(): Split "NASA's" into ("NASA", "'s")

Dependencies:
    - regex: Unicode letter class (\p{L})

Used By:
    - titlecase.tokenizer: Token.base / Token.suffix
    - titlecase.rules: WordContext construction
"""

from __future__ import annotations

from typing import Tuple

import regex

# Base is letters and ASCII digits only; the 's' must be lowercase.
POSSESSIVE_PATTERN = regex.compile(r"([\p{L}0-9]+)(['’]s)")


def split_suffix(word: str) -> Tuple[str, str]:
    """
    Split a possessive suffix off word.

    Args:
        word: A single word token.

    Returns:
        (base, suffix). When word carries no possessive, suffix is "" and
        base is word unchanged.

    Example:
        >>> split_suffix("McDonald’s")
        ('McDonald', '’s')
        >>> split_suffix("don't")
        ("don't", '')
    """
    match = POSSESSIVE_PATTERN.fullmatch(word)
    if match is None:
        return word, ""
    return match.group(1), match.group(2)
