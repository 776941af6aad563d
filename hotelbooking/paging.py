"""Limit/offset paging parameters."""

import re
from dataclasses import dataclass

from .errs import InvalidContentError

_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Paging:
    limit: int
    offset: int


def _parse_int(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise InvalidContentError(f"not an integer: {text!r}")
    return int(text)


def validate_paging(limit_text: str, offset_text: str) -> Paging:
    """Parse limit and offset; raise InvalidContentError when they are unusable."""
    if not limit_text or not offset_text:
        raise InvalidContentError("limit and offset are required")
    limit = _parse_int(limit_text)
    offset = _parse_int(offset_text)
    if limit < 1 or offset < 0:
        raise InvalidContentError("limit must be positive and offset non-negative")
    return Paging(limit=limit, offset=offset)