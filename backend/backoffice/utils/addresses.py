"""Helpers for the free-text addresses stored on clients and settings."""

from __future__ import annotations

import re
from typing import Iterable, Optional

# Structured address parts are joined with this separator when no
# formatted address string is available.
SEGMENT_SEPARATOR = " | "

_PIPE_RE = re.compile(r"\s*\|\s*")
_COMMAS_RE = re.compile(r",+")
_EDGES_RE = re.compile(r"^[,\s]+|[,\s]+$")


def normalize_address(address: Optional[str]) -> str:
    """Make a pipe-delimited address acceptable to Google Maps.

    >>> normalize_address("Rua X | Bairro Y | Cidade Z")
    'Rua X, Bairro Y, Cidade Z'
    """
    if not address:
        return ""
    normalized = _PIPE_RE.sub(", ", address)
    normalized = _COMMAS_RE.sub(",", normalized)
    return _EDGES_RE.sub("", normalized)


def join_address_parts(parts: Iterable[Optional[str]]) -> str:
    """Join non-empty structured parts (street, number, city...) with pipes."""
    return SEGMENT_SEPARATOR.join(p.strip() for p in parts if p and p.strip())
