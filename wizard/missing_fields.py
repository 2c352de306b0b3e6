"""Utilities for identifying blank values in an onboarding record."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any


def get_field_value(record: Any, field: str) -> Any:
    """Return ``field`` from ``record`` whether it is a model or a mapping."""

    if isinstance(record, Mapping):
        return record.get(field)
    return getattr(record, field, None)


def is_blank(value: Any) -> bool:
    """Return ``True`` when ``value`` should be treated as missing."""

    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (list, tuple, set, frozenset, dict)):
        return len(value) == 0
    return False


def missing_fields(record: Any, fields: Iterable[str]) -> list[str]:
    """Return the subset of ``fields`` that are blank or missing in ``record``."""

    return [field for field in fields if is_blank(get_field_value(record, field))]


__all__ = ["get_field_value", "is_blank", "missing_fields"]
