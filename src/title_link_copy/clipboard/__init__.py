"""
Module: clipboard

Purpose:
    Copy workflow around the title-case core: formatting copied text,
    building hyperlink payloads, routing copy actions and writing to the
    system clipboard.

Key Modules:
    - formatting: Plain-text and HTML payload construction
    - actions: Copy actions and target resolution
    - writer: Qt clipboard writer with plain-text fallback
"""

from title_link_copy.clipboard.actions import CopyAction, CopyContext, build_payload
from title_link_copy.clipboard.formatting import (
    ClipboardPayload,
    CopyItems,
    build_hyperlink,
    escape_html,
    format_copy_text,
)
from title_link_copy.clipboard.writer import ClipboardError, ClipboardWriter

__all__ = [
    "CopyAction",
    "CopyContext",
    "build_payload",
    "ClipboardPayload",
    "CopyItems",
    "build_hyperlink",
    "escape_html",
    "format_copy_text",
    "ClipboardError",
    "ClipboardWriter",
]
