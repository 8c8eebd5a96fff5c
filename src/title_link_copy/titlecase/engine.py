"""
Module: titlecase.engine

Purpose:
    Entry point for AP-style headline title casing. Parses the text,
    recases the words through the rule chain and reassembles the result
    with the original separators untouched.

Key Functions:
    - ap_style_title_case(): Title-case a string; total over all inputs

Used By:
    - clipboard.formatting: Titles copied with AP title casing enabled
    - cli: `titlecase` subcommand
"""

from __future__ import annotations

import logging
from typing import Optional

from title_link_copy.titlecase.rules import title_case_words
from title_link_copy.titlecase.tokenizer import parse_text, reassemble_text

logger = logging.getLogger(__name__)


def ap_style_title_case(text: Optional[str]) -> str:
    """
    Convert text to AP-style title case.

    Acronyms, words with internal capitals and digit-led words are kept
    as-is; the first and last words are always capitalized; short minor
    words are lowercased elsewhere. Spacing and punctuation between words
    are preserved exactly.

    Args:
        text: Title to convert. None or "" yields "".

    Returns:
        The title-cased string.

    Example:
        >>> ap_style_title_case("NASA launches new satellite")
        'NASA Launches New Satellite'
        >>> ap_style_title_case("how to win friends")
        'How To Win Friends'
    """
    if not text:
        return ""

    parsed = parse_text(text)
    cased = title_case_words(parsed.words)
    logger.debug(f"Title-cased {len(cased)} words")
    return reassemble_text(cased, parsed.separators)
