"""Parsing of ``R,G,B`` colour specifications."""

from __future__ import annotations

import re

from .utils import CubError

_DIGITS = frozenset("0123456789")
_ATOI = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")


class ColorError(CubError, ValueError):
    """Raised when a colour specification is malformed or out of range."""


def _fields(text: str) -> list[str]:
    return [field for field in text.split(",") if field]


def _atoi(text: str) -> int:
    match = _ATOI.match(text)
    sign, digits = match.groups()
    if not digits:
        return 0
    value = int(digits)
    return -value if sign == "-" else value


def _pack(r: int, g: int, b: int) -> int:
    if not all(0 <= part <= 255 for part in (r, g, b)):
        raise ColorError("Color values must be between 0 and 255")
    return (r << 16) | (g << 8) | b


def _well_formed(text: str | None) -> bool:
    if text is None:
        return False
    if any(ch != "," and ch not in _DIGITS for ch in text):
        return False
    return text.count(",") == 2


def validate_color(text: str | None) -> int:
    """Strictly parse ``R,G,B`` (digits and exactly two commas) into ``0xRRGGBB``."""
    if not _well_formed(text):
        raise ColorError("Invalid color format")
    fields = _fields(text)
    if len(fields) < 3:
        raise ColorError("Invalid color format")
    r, g, b = (int(field) for field in fields[:3])
    return _pack(r, g, b)


def parse_color(text: str) -> int:
    """Leniently parse the first three comma-separated numbers into ``0xRRGGBB``."""
    fields = _fields(text)
    if len(fields) < 3:
        raise ColorError("Invalid color format")
    r, g, b = (_atoi(field) for field in fields[:3])
    return _pack(r, g, b)