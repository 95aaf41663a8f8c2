"""Utility helpers shared by the folio configuration loader."""

from __future__ import annotations

import typing as typ

from .models import FolioConfigError


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _require_number(
    payload: typ.Mapping[str, typ.Any],
    key: str,
    default: float,
    *,
    minimum: float | None = None,
    maximum: float | None = None,
) -> float:
    """Read a numeric setting, enforcing inclusive bounds when given."""
    value = payload.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int | float):
        msg = f"View setting '{key}' must be a number, got {value!r}."
        raise FolioConfigError(msg)
    if minimum is not None and value < minimum:
        msg = f"View setting '{key}' must be at least {minimum}, got {value!r}."
        raise FolioConfigError(msg)
    if maximum is not None and value > maximum:
        msg = f"View setting '{key}' must be at most {maximum}, got {value!r}."
        raise FolioConfigError(msg)
    return float(value)


def _normalize_extensions(value: object) -> frozenset[str]:
    """Normalize an extension list into lower-case entries without dots."""
    match value:
        case str() as text:
            entries = text.replace(",", " ").split()
        case list() as items:
            entries = [str(item) for item in items]
        case _:
            msg = "View setting 'video_extensions' must be a list of extensions."
            raise FolioConfigError(msg)
    normalized = {entry.strip().lstrip(".").lower() for entry in entries}
    normalized.discard("")
    if not normalized:
        msg = "View setting 'video_extensions' must name at least one extension."
        raise FolioConfigError(msg)
    return frozenset(normalized)


__all__ = ["_normalize_extensions", "_optional_str", "_require_number"]
