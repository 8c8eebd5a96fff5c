"""
Module: titlecase

Purpose:
    AP-style headline title casing. Splits a title into word tokens and
    separators, recases each word through an ordered rule chain, and
    reassembles the original spacing and punctuation around the result.

Key Modules:
    - tokenizer: Word/separator split and reassembly
    - suffix: Possessive suffix splitting
    - predicates: Character-class checks shared by tokens and rules
    - rules: Ordered casing rules and the minor-word set
    - engine: ap_style_title_case() entry point

Used By:
    - clipboard.formatting: Title casing of copied titles
    - cli: `titlecase` subcommand
"""

from title_link_copy.titlecase.engine import ap_style_title_case
from title_link_copy.titlecase.rules import (
    CASING_RULES,
    MINOR_WORDS,
    CasingRule,
    WordContext,
    classify_word,
    title_case_words,
)
from title_link_copy.titlecase.suffix import split_suffix
from title_link_copy.titlecase.tokenizer import (
    ParsedText,
    Token,
    parse_text,
    reassemble_text,
)

__all__ = [
    "ap_style_title_case",
    "CASING_RULES",
    "MINOR_WORDS",
    "CasingRule",
    "WordContext",
    "classify_word",
    "title_case_words",
    "split_suffix",
    "ParsedText",
    "Token",
    "parse_text",
    "reassemble_text",
]
