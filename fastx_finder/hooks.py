"""Default text transforms and the target-name entry filter.

The scanner never hard-codes how header, sequence or quality text is cleaned
up. It calls the functions carried on its configuration, which default to
the pure functions below.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Callable, Mapping, Optional

TextTransform = Callable[[str], str]


def default_header_transform(text: str) -> str:
    """Trim surrounding whitespace from a header."""

    return text.strip()


def default_sequence_transform(text: str) -> str:
    """Drop every whitespace character and uppercase the residues."""

    return "".join(text.split()).upper()


def default_quality_transform(text: str) -> str:
    """Trim surrounding whitespace from a quality string."""

    return text.strip()


def matches_target(header: str, target_name: Optional[str], case_sensitive: bool = False) -> bool:
    """Return True when ``target_name`` occurs in ``header``.

    An empty or missing target accepts every header.
    """

    if not target_name:
        return True
    if case_sensitive:
        return target_name in header
    return target_name.casefold() in header.casefold()


DEFAULT_TRANSFORMS: Mapping[str, TextTransform] = MappingProxyType(
    {
        "header": default_header_transform,
        "sequence": default_sequence_transform,
        "quality": default_quality_transform,
    }
)


__all__ = [
    "DEFAULT_TRANSFORMS",
    "TextTransform",
    "default_header_transform",
    "default_quality_transform",
    "default_sequence_transform",
    "matches_target",
]
