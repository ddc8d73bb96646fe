from __future__ import annotations

from .errors import EncodingError


# 1 for every byte that starts a scalar value (signed value >= -64), 0 for
# continuation bytes 0b10xxxxxx.
_LEADING = bytes(0 if 0x80 <= b < 0xC0 else 1 for b in range(256))


def is_continuation(b: int) -> bool:
    return b & 0xC0 == 0x80


def is_char_boundary(buf: memoryview | bytes, i: int) -> bool:
    """True if a scalar value starts at byte offset ``i`` (or ``i`` is the end)."""
    if i < 0 or i > len(buf):
        return False
    if i == 0 or i == len(buf):
        return True
    return not is_continuation(buf[i])


def char_width(lead: int) -> int:
    """Encoded width of the scalar value whose first byte is ``lead``.

    A continuation byte is not a valid lead and counts as 1.
    """
    if lead < 0xC0:
        return 1
    if lead < 0xE0:
        return 2
    if lead < 0xF0:
        return 3
    return 4


def next_char_boundary(buf: memoryview | bytes, start: int = 0) -> int | None:
    """Width of the first scalar value at ``start``, or None if nothing is left.

    Probes offsets 1, 2 and 3 for a boundary; a scalar value is never longer
    than 4 bytes.
    """
    n = len(buf) - start
    if n <= 0:
        return None
    for width in (1, 2, 3):
        if width == n or not is_continuation(buf[start + width]):
            return width
    return 4


def count_scalars(buf: memoryview | bytes, start: int = 0) -> int:
    """Count scalar values by counting leading bytes, without decoding."""
    leading = _LEADING
    return sum(leading[b] for b in buf[start:])


def validate(buf: memoryview | bytes) -> None:
    try:
        str(buf, "utf-8")
    except UnicodeDecodeError as e:
        raise EncodingError(
            offset=e.start,
            message=f"invalid utf-8: {e.reason}",
            hint="decode the input with the right codec or pass validate=False to trust it",
        ) from e
