"""Split text into UTF-8 characters by lead-byte class."""

from __future__ import annotations

# Lone surrogates encode as three-byte sequences.
_ERRORS = "surrogatepass"


def _sequence_length(lead: int) -> int:
    """Return how many bytes the sequence starting with ``lead`` spans."""
    if lead & 0x80 == 0x00:
        return 1
    if lead & 0xE0 == 0xC0:
        return 2
    if lead & 0xF0 == 0xE0:
        return 3
    if lead & 0xF8 == 0xF0:
        return 4
    # Continuation or invalid lead byte: emit it on its own.
    return 1


def segment_bytes(data: bytes) -> list[bytes]:
    """Split raw UTF-8 bytes into one chunk per encoded character.

    Malformed input never fails: an unrecognised byte becomes a one-byte chunk
    and a sequence truncated by the end of input keeps whatever bytes remain.
    ``b"".join(segment_bytes(data)) == data`` always holds.
    """
    chunks: list[bytes] = []
    index = 0
    while index < len(data):
        step = _sequence_length(data[index])
        chunks.append(data[index : index + step])
        index += step
    return chunks


def segment(text: str) -> list[str]:
    """Split text into user-visible characters along UTF-8 boundaries.

    Lone surrogates, including bytes escaped while reading a lesson file,
    come back as one character each.
    """
    raw = text.encode("utf-8", _ERRORS)
    return [chunk.decode("utf-8", _ERRORS) for chunk in segment_bytes(raw)]
