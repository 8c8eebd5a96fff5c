"""
Module: clipboard.writer

Purpose:
    Write payloads to the system clipboard through Qt. Rich payloads are
    written as QMimeData carrying text/html and text/plain; if that
    fails the plain text alone is written.

Key Classes:
    - ClipboardWriter: Copies text and payloads
    - ClipboardError: No clipboard write succeeded

Dependencies:
    - PySide6: QGuiApplication clipboard, QMimeData

Used By:
    - cli: `copy` subcommand
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any, Optional

from PySide6.QtCore import QMimeData

from title_link_copy.clipboard.formatting import ClipboardPayload

logger = logging.getLogger(__name__)

# Keeps a lazily created application alive for the clipboard's lifetime.
_owned_app: Optional[Any] = None


class ClipboardError(RuntimeError):
    """Raised when text could not be written to the clipboard."""


def _has_display() -> bool:
    if sys.platform != "linux":
        return True
    return any(
        os.environ.get(name)
        for name in ("DISPLAY", "WAYLAND_DISPLAY", "QT_QPA_PLATFORM")
    )


def _system_clipboard():
    """Return the application clipboard, creating a QGuiApplication if needed."""
    global _owned_app
    from PySide6.QtGui import QGuiApplication

    app = QGuiApplication.instance()
    if app is None:
        if not _has_display():
            raise ClipboardError("No display available for clipboard access")
        _owned_app = app = QGuiApplication(sys.argv[:1] or ["title-link-copy"])
    return app.clipboard()


class ClipboardWriter:
    """
    Clipboard writer with an HTML-then-plain-text fallback.

    Args:
        clipboard: Object with the QClipboard setText/setMimeData API.
            Defaults to the QGuiApplication clipboard, resolved on first
            use.

    Example:
        >>> writer = ClipboardWriter()
        >>> writer.copy_text("Title\\nhttps://example.com")
    """

    def __init__(self, clipboard: Optional[Any] = None) -> None:
        self._clipboard = clipboard

    @property
    def clipboard(self):
        if self._clipboard is None:
            self._clipboard = _system_clipboard()
        return self._clipboard

    def copy_text(self, text: str) -> None:
        """
        Write plain text.

        Raises:
            ClipboardError: If the clipboard rejected the write.
        """
        clipboard = self.clipboard
        try:
            clipboard.setText(text)
        except RuntimeError as e:
            raise ClipboardError(f"Clipboard write failed: {e}") from e
        self._flush()

    def copy_html(self, html: str, plain: str) -> bool:
        """
        Write HTML with a plain-text alternative.

        Returns:
            True if the rich copy succeeded, False if it fell back to
            plain text.

        Raises:
            ClipboardError: If the plain-text fallback also failed.
        """
        clipboard = self.clipboard
        try:
            mime = QMimeData()
            mime.setHtml(html)
            mime.setText(plain)
            clipboard.setMimeData(mime)
        except RuntimeError as e:
            logger.warning(f"HTML clipboard copy failed, using plain text: {e}")
            self.copy_text(plain)
            return False
        self._flush()
        return True

    def copy_payload(self, payload: ClipboardPayload) -> None:
        if payload.html is not None:
            self.copy_html(payload.html, payload.plain)
        else:
            self.copy_text(payload.plain)

    def _flush(self) -> None:
        # Let the platform plugin pick up ownership before a CLI exits.
        if _owned_app is not None:
            _owned_app.processEvents()
