"""Domain helpers for property validation and id assignment."""
from __future__ import annotations

import math
import time
from typing import Any, Iterable, Mapping

TEXT_FIELDS = (
    "title",
    "address",
    "condition",
    "description",
    "cover_image_url",
    "photos_google_drive_link",
)
NUMERIC_FIELDS = (
    "bedrooms",
    "bathrooms",
    "suites",
    "built_area",
    "total_area",
    "price",
)
# Ordem em que os campos sao verificados (e reportados) pela validacao
REQUIRED_FIELDS = (
    "title",
    "address",
    "bedrooms",
    "bathrooms",
    "suites",
    "built_area",
    "total_area",
    "price",
    "condition",
    "description",
    "cover_image_url",
    "photos_google_drive_link",
)


def is_missing(value: Any) -> bool:
    """Return True for absent/empty values; numeric zero counts as present."""
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, float) and math.isnan(value):
        return True
    return False


def is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    if isinstance(value, int):
        return True
    return math.isfinite(value)


def validate_property(candidate: Any, partial: bool = False) -> str | None:
    """
    Check required fields and numeric types of a candidate property.

    Returns the message of the first failing check, or None when the
    candidate is valid. With partial=True only the supplied fields are
    checked (PATCH semantics).
    """
    if not isinstance(candidate, Mapping):
        return "O corpo da requisicao deve ser um objeto JSON."
    for field in REQUIRED_FIELDS:
        if partial and field not in candidate:
            continue
        if is_missing(candidate.get(field)):
            return f"O campo '{field}' e obrigatorio."
    for field in NUMERIC_FIELDS:
        if partial and field not in candidate:
            continue
        if not is_number(candidate.get(field)):
            return f"O campo '{field}' deve ser um numero."
    return None


def new_property_id(existing: Iterable[str], now_ms: int | None = None) -> str:
    """
    Build a timestamp-derived id (milliseconds) that is not in `existing`.

    Creates landing in the same millisecond get the next free value, so ids
    stay unique within a collection while keeping their ordering by time.
    """
    used = {str(value) for value in existing}
    candidate = int(now_ms if now_ms is not None else time.time() * 1000)
    while str(candidate) in used:
        candidate += 1
    return str(candidate)
