"""
Module: common.options

Purpose:
    Copy options record. Options arrive loosely typed (a dict from a
    config file, an extension message, CLI flags); from_mapping() turns
    any such input into a valid CopyOptions. Malformed values fall back
    to defaults and never raise.

Key Classes:
    - SelectedTextPlacement: Where selected text goes relative to the URL
    - CopyOptions: Immutable options record

Used By:
    - clipboard.formatting: Title casing and placement
    - clipboard.actions: Payload construction
    - cli: Flag mapping
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from collections.abc import Mapping
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class SelectedTextPlacement(str, Enum):
    ABOVE = "above"
    BELOW = "below"
    NONE = "none"

    @classmethod
    def parse(cls, value: Any) -> "SelectedTextPlacement":
        """Parse a placement value, falling back to BELOW for anything unknown."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        if value:
            logger.warning(f"Unknown selected text placement {value!r}, using 'below'")
        return cls.BELOW


_FALSE_STRINGS = frozenset({"", "0", "false", "no", "off"})


def _parse_flag(value: Any) -> bool:
    """Read a flag; strings such as "false" or "0" are False, anything else by truthiness."""
    if isinstance(value, str):
        return value.strip().lower() not in _FALSE_STRINGS
    return bool(value)


@dataclass(frozen=True)
class CopyOptions:
    """
    Options controlling how copied text is formatted.

    Attributes:
        use_ap_title_case: Apply AP-style title casing to titles.
        selected_text_placement: Put selected text above or below the URL,
            or leave it out.

    Example:
        >>> CopyOptions.from_mapping({"useApTitleCase": 1})
        CopyOptions(use_ap_title_case=True, selected_text_placement=<SelectedTextPlacement.BELOW: 'below'>)
    """
    use_ap_title_case: bool = False
    selected_text_placement: SelectedTextPlacement = SelectedTextPlacement.BELOW

    def __post_init__(self) -> None:
        # Accept plain strings such as "above" or "false" from callers.
        object.__setattr__(self, "use_ap_title_case", _parse_flag(self.use_ap_title_case))
        object.__setattr__(
            self,
            "selected_text_placement",
            SelectedTextPlacement.parse(self.selected_text_placement),
        )

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "CopyOptions":
        """
        Build options from a loosely-typed mapping.

        Accepts camelCase keys (useApTitleCase, selectedTextPlacement) or
        their snake_case equivalents. The flag is read by truthiness; a
        missing or unknown placement becomes "below".
        """
        if not isinstance(data, Mapping):
            if data is not None:
                logger.warning(f"Ignoring malformed options of type {type(data).__name__}")
            return cls()

        flag = data.get("useApTitleCase", data.get("use_ap_title_case", False))
        placement = data.get(
            "selectedTextPlacement",
            data.get("selected_text_placement"),
        )
        return cls(
            use_ap_title_case=bool(flag),
            selected_text_placement=SelectedTextPlacement.parse(placement),
        )

    def to_mapping(self) -> Dict[str, Any]:
        """Return the camelCase dict form."""
        return {
            "selectedTextPlacement": self.selected_text_placement.value,
            "useApTitleCase": self.use_ap_title_case,
        }
