"""
Module: clipboard.formatting

Purpose:
    Build what ends up on the clipboard: newline-joined title/URL/selection
    text, and hyperlink payloads carrying both an HTML anchor and a plain
    text alternative.

Key Functions:
    - format_copy_text(): Title, URL and selection as plain text lines
    - build_hyperlink(): HTML anchor plus plain text
    - escape_html(): Escape text for HTML content or attributes

Key Classes:
    - CopyItems: What to copy
    - ClipboardPayload: Plain text with optional HTML

Used By:
    - clipboard.actions: build_payload()
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from title_link_copy.common.options import CopyOptions, SelectedTextPlacement
from title_link_copy.titlecase import ap_style_title_case

_HTML_ESCAPES = str.maketrans({
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#39;",
})


@dataclass(frozen=True)
class CopyItems:
    """
    Pieces of a copy operation. Empty or None items are skipped.

    Attributes:
        title: Page title or link text.
        url: Page or link URL.
        selected_text: Text the user had selected.
    """
    title: Optional[str] = None
    url: Optional[str] = None
    selected_text: Optional[str] = None


@dataclass(frozen=True)
class ClipboardPayload:
    """
    Clipboard content.

    Attributes:
        plain: Plain text, always present.
        html: Rich HTML variant, or None for plain-text-only copies.
    """
    plain: str
    html: Optional[str] = None

    @property
    def is_rich(self) -> bool:
        return self.html is not None


def escape_html(text: str) -> str:
    """
    Escape the five HTML special characters.

    Example:
        >>> escape_html('Tom & "Jerry"')
        'Tom &amp; &quot;Jerry&quot;'
    """
    return text.translate(_HTML_ESCAPES)


def _display_title(title: str, options: CopyOptions) -> str:
    if options.use_ap_title_case:
        return ap_style_title_case(title)
    return title


def format_copy_text(items: CopyItems, options: CopyOptions) -> str:
    """
    Format items as newline-separated plain text.

    Order: title, selection (placement "above"), URL, selection
    (placement "below"). Placement "none" leaves the selection out.

    Args:
        items: What to copy.
        options: Title casing and selection placement.

    Returns:
        The joined lines; "" when every item is empty.

    Example:
        >>> format_copy_text(
        ...     CopyItems(title="a tale of two cities", url="https://example.com"),
        ...     CopyOptions(use_ap_title_case=True),
        ... )
        'A Tale of Two Cities\\nhttps://example.com'
    """
    lines: List[str] = []
    placement = options.selected_text_placement

    if items.title:
        lines.append(_display_title(items.title, options))

    if items.selected_text and placement is SelectedTextPlacement.ABOVE:
        lines.append(items.selected_text)

    if items.url:
        lines.append(items.url)

    if items.selected_text and placement is SelectedTextPlacement.BELOW:
        lines.append(items.selected_text)

    return "\n".join(lines)


def build_hyperlink(
    title: str,
    url: str,
    selected_text: Optional[str],
    options: CopyOptions,
) -> ClipboardPayload:
    """
    Build an HTML anchor and its plain-text alternative.

    Selected text is placed before or after the link (separated by <br>
    in HTML, by a newline in plain text) according to the placement
    option.

    Args:
        title: Link title; AP-cased when enabled in options.
        url: Link target.
        selected_text: Optional selection to include.
        options: Title casing and selection placement.

    Returns:
        ClipboardPayload with both html and plain set.
    """
    title = _display_title(title, options)
    anchor = f'<a href="{escape_html(url)}">{escape_html(title)}</a>'
    html = anchor
    plain = f"{title}\n{url}"

    placement = options.selected_text_placement
    if selected_text and placement is not SelectedTextPlacement.NONE:
        if placement is SelectedTextPlacement.ABOVE:
            html = f"{escape_html(selected_text)}<br>{anchor}"
            plain = f"{selected_text}\n{title}\n{url}"
        else:
            html = f"{anchor}<br>{escape_html(selected_text)}"
            plain = f"{title}\n{url}\n{selected_text}"

    return ClipboardPayload(plain=plain, html=html)
