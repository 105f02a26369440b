"""Utility helpers shared by the site model loader and option resolution."""

from __future__ import annotations

import logging
import re
import typing as typ

from .models import DEFAULT_THEME, THEMES

logger = logging.getLogger(__name__)

_TRUE_STRINGS = frozenset({"1", "true", "yes", "on"})
_FALSE_STRINGS = frozenset({"0", "false", "no", "off"})


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _first_present(payload: typ.Mapping[str, typ.Any], *keys: str) -> typ.Any:
    """Return the value of the first key present in ``payload``, else None."""
    for key in keys:
        if key in payload:
            return payload[key]
    return None


def _coerce_bool(value: object, default: bool) -> bool:  # noqa: FBT001
    """Interpret ``value`` as a boolean, returning ``default`` when unclear."""
    match value:
        case bool():
            return value
        case int():
            return value != 0
        case str() as text if text.strip().lower() in _TRUE_STRINGS:
            return True
        case str() as text if text.strip().lower() in _FALSE_STRINGS:
            return False
        case None:
            return default
        case _:
            logger.debug("Ignoring non-boolean option value %r", value)
            return default


def _normalize_theme(value: object | None) -> str:
    """Return a known theme name, falling back to ``modern`` for anything else."""
    text = _optional_str(value)
    if text is None:
        return DEFAULT_THEME
    lowered = text.lower()
    if lowered in THEMES:
        return lowered
    logger.debug("Unknown theme %r; using %s", value, DEFAULT_THEME)
    return DEFAULT_THEME


def _slugify(value: str) -> str:
    """Convert a string into a lowercase hyphen-separated slug."""
    return re.sub(r"[^a-z0-9]+", "-", value.lower()).strip("-")


def _unique_id(base: str, used: set[str]) -> str:
    """Return a unique identifier, appending numeric suffixes and mutating ``used``."""
    candidate = base
    suffix = 2
    while candidate in used:
        candidate = f"{base}-{suffix}"
        suffix += 1
    used.add(candidate)
    return candidate


__all__ = [
    "_coerce_bool",
    "_first_present",
    "_normalize_theme",
    "_optional_str",
    "_slugify",
    "_unique_id",
]
