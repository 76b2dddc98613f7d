"""Byte decoding and line splitting for file content."""

from __future__ import annotations

import codecs
from typing import List, Tuple

from hermes.classifier.errors import DecodeError

# Longest BOMs first: the UTF-32 LE BOM starts with the UTF-16 LE BOM.
_BOMS: Tuple[Tuple[bytes, str], ...] = (
    (codecs.BOM_UTF32_LE, "utf-32-le"),
    (codecs.BOM_UTF32_BE, "utf-32-be"),
    (codecs.BOM_UTF8, "utf-8"),
    (codecs.BOM_UTF16_LE, "utf-16-le"),
    (codecs.BOM_UTF16_BE, "utf-16-be"),
)


def sniff_encoding(data: bytes) -> Tuple[str, int]:
    """Return (encoding, bom_length). Defaults to UTF-8 without a BOM."""
    for bom, encoding in _BOMS:
        if data.startswith(bom):
            return encoding, len(bom)
    return "utf-8", 0


def decode_text(data: bytes, source: str = "<bytes>") -> str:
    """Decode file content, honouring a byte-order mark when present.

    Without a BOM the content is read as UTF-8 and invalid bytes (Latin-1
    or cp1252 sources) become U+FFFD. Content that contradicts its own BOM
    raises DecodeError.
    """
    encoding, skip = sniff_encoding(data)
    if not skip:
        return data.decode(encoding, errors="replace")
    try:
        return data[skip:].decode(encoding)
    except UnicodeDecodeError as exc:
        raise DecodeError(
            f"Cannot decode {source} as {encoding}: invalid byte at offset {exc.start + skip}"
        ) from exc


def line_offsets(text: str) -> List[int]:
    """Offsets at which each line starts.

    Lines are separated by ``\\n``; a trailing newline does not open an
    extra line and empty text has no lines.
    """
    if not text:
        return []
    starts = [0]
    idx = text.find("\n")
    while idx != -1:
        starts.append(idx + 1)
        idx = text.find("\n", idx + 1)
    if text.endswith("\n"):
        starts.pop()
    return starts


def split_lines(text: str) -> List[str]:
    """Split *text* into lines without terminators (CRLF aware)."""
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]
