"""
Clipboard output through Qt.

A QGuiApplication is created on demand when the caller is not already
running inside one (the command line case).
"""

from __future__ import annotations

from PySide6.QtGui import QClipboard, QGuiApplication

from .errors import ClipboardError
from .logger import CTX, get_logger

log = get_logger(CTX.CLIPBOARD)


def _application() -> QGuiApplication:
    app = QGuiApplication.instance()
    if app is None:
        app = QGuiApplication([])
    return app


def copy_to_clipboard(text: str) -> None:
    """
    Place `text` on the system clipboard.

    Raises ClipboardError when the clipboard is unavailable or does not
    hold the text afterwards (e.g. locked by another application).
    """
    app = _application()
    clipboard = app.clipboard()
    if clipboard is None:
        raise ClipboardError("No clipboard available on this platform.")

    try:
        clipboard.setText(text, QClipboard.Mode.Clipboard)
    except RuntimeError as exc:
        raise ClipboardError(f"Could not copy to clipboard: {exc}") from exc

    if clipboard.text(QClipboard.Mode.Clipboard) != text:
        raise ClipboardError(
            "Could not copy to clipboard because another application is using it."
        )
    log.info("Copied %d characters to the clipboard", len(text))
