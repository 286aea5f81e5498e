"""
Text helpers used around the generator:

- decode / encode between raw bytes and str, keyed by an encoding label.
- graphemes: split text into user-perceived characters.

The generator itself only ever sees already-decoded grapheme clusters.
"""

from __future__ import annotations

import codecs

import regex

from .errors import UnsupportedEncoding
from .logger import CTX, get_logger

log = get_logger(CTX.ENCODING)

_GRAPHEME = regex.compile(r"\X")


def _lookup(encoding: str) -> codecs.CodecInfo:
    try:
        info = codecs.lookup(encoding)
    except LookupError:
        raise UnsupportedEncoding(encoding) from None

    # Only real text encodings, not bytes-to-bytes codecs like "base64".
    if not getattr(info, "_is_text_encoding", True):
        raise UnsupportedEncoding(encoding)
    return info


def decode(data: bytes, encoding: str) -> str:
    """
    Decode `data` with the codec named by `encoding`.

    Malformed sequences become U+FFFD instead of failing.
    """
    info = _lookup(encoding)
    text, _consumed = info.decode(data, "replace")
    log.debug("Decoded %d bytes as %s", len(data), info.name)
    return text


def encode(text: str, encoding: str) -> bytes:
    """
    Encode `text` with the codec named by `encoding`.

    Characters the target encoding cannot represent are written as HTML
    numeric character references (e.g. "&#128512;").
    """
    info = _lookup(encoding)
    data, _consumed = info.encode(text, "xmlcharrefreplace")
    return data


def graphemes(text: str) -> list[str]:
    """
    Split `text` into extended grapheme clusters.

    "👨‍👩‍👦" (five code points) and "🇯🇵" (two) each come back as a
    single entry.
    """
    return _GRAPHEME.findall(text)
