"""
Module: clipboard.actions

Purpose:
    Copy actions and what they copy. An action names the pieces to copy
    (title, URL, selection, or a hyperlink); a CopyContext describes what
    the user invoked it on. When the context carries a link URL the link
    is the target, otherwise the page is.

Key Functions:
    - build_payload(): Clipboard payload for an action in a context

Key Classes:
    - CopyAction: Available copy actions
    - CopyContext: Page, link and selection the action applies to

Used By:
    - cli: `copy` subcommand
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from title_link_copy.clipboard.formatting import (
    ClipboardPayload,
    CopyItems,
    build_hyperlink,
    format_copy_text,
)
from title_link_copy.common.options import CopyOptions

logger = logging.getLogger(__name__)

DEFAULT_LINK_TITLE = "Link"
_LEGACY_PREFIX = "ttlc-"


class CopyAction(str, Enum):
    PAGE_TITLE_LINK = "page-title-link"
    PAGE_TITLE_ONLY = "page-title-only"
    PAGE_LINK_ONLY = "page-link-only"
    LINK_TEXT_URL = "link-text-url"
    LINK_TEXT_ONLY = "link-text-only"
    LINK_URL_ONLY = "link-url-only"
    HYPERLINK = "hyperlink"

    @classmethod
    def from_name(cls, name: str) -> "CopyAction":
        """
        Resolve an action name.

        Accepts action values, keyboard command names such as
        "copy-title-link" and "ttlc-"-prefixed menu ids.

        Raises:
            ValueError: If name matches no action.
        """
        key = name.strip().lower()
        if key.startswith(_LEGACY_PREFIX):
            key = key[len(_LEGACY_PREFIX):]
        if key in _ALIASES:
            return _ALIASES[key]
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unknown copy action: {name!r}") from None

    @property
    def includes_title(self) -> bool:
        return self in _TITLE_ACTIONS

    @property
    def includes_url(self) -> bool:
        return self in _URL_ACTIONS

    @property
    def includes_selection(self) -> bool:
        # Selection accompanies the title, never a bare URL.
        return self.includes_title


_ALIASES: Dict[str, CopyAction] = {
    "copy-title-link": CopyAction.PAGE_TITLE_LINK,
    "copy-title-only": CopyAction.PAGE_TITLE_ONLY,
    "copy-link-only": CopyAction.PAGE_LINK_ONLY,
    "copy-hyperlink": CopyAction.HYPERLINK,
    "universal-hyperlink": CopyAction.HYPERLINK,
}

_TITLE_ACTIONS = frozenset({
    CopyAction.PAGE_TITLE_LINK,
    CopyAction.PAGE_TITLE_ONLY,
    CopyAction.LINK_TEXT_URL,
    CopyAction.LINK_TEXT_ONLY,
})

_URL_ACTIONS = frozenset({
    CopyAction.PAGE_TITLE_LINK,
    CopyAction.PAGE_LINK_ONLY,
    CopyAction.LINK_TEXT_URL,
    CopyAction.LINK_URL_ONLY,
})


@dataclass(frozen=True)
class CopyContext:
    """
    What a copy action was invoked on.

    Attributes:
        page_title: Title of the current page.
        page_url: URL of the current page.
        link_text: Text of the link under the cursor, if any.
        link_url: URL of the link under the cursor, if any.
        selection_text: Currently selected text, if any.
    """
    page_title: str = ""
    page_url: str = ""
    link_text: Optional[str] = None
    link_url: Optional[str] = None
    selection_text: Optional[str] = None

    @property
    def is_link(self) -> bool:
        return bool(self.link_url)

    def resolve_target(self) -> Tuple[str, str]:
        """
        Return (title, url) of the copy target.

        Links win over the page; a link's title falls back to the
        selection, then to "Link".
        """
        if self.is_link:
            title = self.link_text or self.selection_text or DEFAULT_LINK_TITLE
            return title, self.link_url or ""
        return self.page_title, self.page_url


def build_payload(
    action: CopyAction,
    context: CopyContext,
    options: CopyOptions,
) -> ClipboardPayload:
    """
    Build the clipboard payload for action.

    Args:
        action: What to copy.
        context: Page, link and selection the action applies to.
        options: Title casing and selection placement.

    Returns:
        Plain-text payload, or a rich payload for CopyAction.HYPERLINK.

    Raises:
        ValueError: If the action would copy nothing, e.g. a hyperlink or
            URL-only copy without a URL.
    """
    title, url = context.resolve_target()

    if action is CopyAction.HYPERLINK:
        if not url:
            raise ValueError("Cannot build a hyperlink without a URL")
        payload = build_hyperlink(title or url, url, context.selection_text, options)
    else:
        items = CopyItems(
            title=title if action.includes_title else None,
            url=url if action.includes_url else None,
            selected_text=context.selection_text if action.includes_selection else None,
        )
        text = format_copy_text(items, options)
        if not text:
            raise ValueError(f"Nothing to copy for action '{action.value}'")
        payload = ClipboardPayload(plain=text)

    logger.info(f"Prepared {action.value} payload ({len(payload.plain)} chars)")
    return payload
