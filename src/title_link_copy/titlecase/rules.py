"""
Module: titlecase.rules

Purpose:
    AP-style casing rules as an ordered predicate chain. Each word is
    checked against CASING_RULES top to bottom and recased by the first
    rule that applies. Preservation rules (acronyms, internal capitals,
    digit-led words) come before positional forcing, so an acronym at the
    start or end of a title is kept verbatim.

Key Functions:
    - classify_word(): First rule matching a word in context
    - title_case_words(): Recase a token sequence

Key Classes:
    - WordContext: A word's base, suffix and position
    - CasingRule: Named (applies, transform) pair

Key Constants:
    - MINOR_WORDS: Short articles, conjunctions and prepositions
    - CASING_RULES: The precedence chain

Used By:
    - titlecase.engine: ap_style_title_case()
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, FrozenSet, List, Sequence, Tuple

from title_link_copy.titlecase.predicates import (
    has_internal_capital,
    is_all_uppercase,
    starts_with_digit,
    title_word,
)
from title_link_copy.titlecase.suffix import split_suffix
from title_link_copy.titlecase.tokenizer import Token

MINOR_WORDS: FrozenSet[str] = frozenset({
    # articles
    "a", "an", "the",
    # coordinating conjunctions
    "and", "but", "for", "nor", "or", "so", "yet",
    # prepositions
    "as", "at", "by", "in", "of", "off", "on", "per", "to", "up", "via",
})

LONG_WORD_LENGTH = 4
INFINITIVE = "to"


@dataclass(frozen=True)
class WordContext:
    """
    A word split into base and possessive suffix, with its position.

    Attributes:
        base: Word without possessive suffix, original case.
        suffix: "'s" / "’s" or "".
        index: 0-based position in the word sequence.
        count: Number of words in the sequence.
    """
    base: str
    suffix: str
    index: int
    count: int

    @classmethod
    def from_word(cls, word: str, index: int, count: int) -> "WordContext":
        base, suffix = split_suffix(word)
        return cls(base=base, suffix=suffix, index=index, count=count)

    @property
    def lower_base(self) -> str:
        return self.base.lower()

    @property
    def lower_suffix(self) -> str:
        return self.suffix.lower()

    @property
    def is_first(self) -> bool:
        return self.index == 0

    @property
    def is_last(self) -> bool:
        return self.index == self.count - 1

    def titled(self) -> str:
        return title_word(self.base) + self.lower_suffix


@dataclass(frozen=True)
class CasingRule:
    """
    One step of the casing chain.

    Attributes:
        name: Short identifier used in logs and tests.
        applies: Predicate over the word context.
        transform: Produces the recased word.
    """
    name: str
    applies: Callable[[WordContext], bool]
    transform: Callable[[WordContext], str]


def _keep_base_lower_suffix(ctx: WordContext) -> str:
    return ctx.base + ctx.lower_suffix


def _keep_verbatim(ctx: WordContext) -> str:
    return ctx.base + ctx.suffix


def _lowercase(ctx: WordContext) -> str:
    return ctx.lower_base + ctx.lower_suffix


def _titled(ctx: WordContext) -> str:
    return ctx.titled()


CASING_RULES: Tuple[CasingRule, ...] = (
    CasingRule("uppercase", lambda ctx: is_all_uppercase(ctx.base), _keep_base_lower_suffix),
    CasingRule("internal-capital", lambda ctx: has_internal_capital(ctx.base), _keep_verbatim),
    CasingRule("leading-digit", lambda ctx: starts_with_digit(ctx.base), _keep_verbatim),
    CasingRule("edge", lambda ctx: ctx.is_first or ctx.is_last, _titled),
    # "to" drops any suffix
    CasingRule(
        "infinitive",
        lambda ctx: ctx.lower_base == INFINITIVE and not ctx.is_last,
        lambda ctx: "To",
    ),
    CasingRule("long-word", lambda ctx: len(ctx.base) >= LONG_WORD_LENGTH, _titled),
    CasingRule("minor-word", lambda ctx: ctx.lower_base in MINOR_WORDS, _lowercase),
    CasingRule("default", lambda ctx: True, _titled),
)


def classify_word(ctx: WordContext) -> CasingRule:
    """
    Return the first rule in CASING_RULES that applies to ctx.

    The final "default" rule always applies, so a rule is always found.
    """
    for rule in CASING_RULES:
        if rule.applies(ctx):
            return rule
    raise AssertionError("CASING_RULES must end with a catch-all rule")


def title_case_words(words: Sequence[Token | str]) -> List[str]:
    """
    Recase every word according to its position in the sequence.

    Args:
        words: Tokens (or plain word strings) in title order.

    Returns:
        Recased words, same length and order as words.

    Example:
        >>> title_case_words(["a", "tale", "of", "two", "cities"])
        ['A', 'Tale', 'of', 'Two', 'Cities']
    """
    count = len(words)
    result: List[str] = []
    for index, word in enumerate(words):
        text = word.text if isinstance(word, Token) else word
        ctx = WordContext.from_word(text, index, count)
        result.append(classify_word(ctx).transform(ctx))
    return result
