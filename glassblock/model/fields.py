from typing import Any

from ..utils.errors import SlotIndexError, ValidationError


def is_int(value: Any) -> bool:
    # bool is an int subclass but never a valid count or dimension
    return isinstance(value, int) and not isinstance(value, bool)


def check_int_range(value: Any, label: str, low: int, high: int) -> int:
    if not is_int(value):
        raise ValidationError(f"{label} must be an integer")
    if value < low or value > high:
        raise ValidationError(f"{label} must be between {low} and {high}")
    return value


def check_count(value: Any, label: str) -> int:
    if not is_int(value):
        raise ValidationError(f"{label} must be an integer")
    if value < 0:
        raise ValidationError(f"{label} cannot be negative")
    return value


def check_index(index: Any, size: int, kind: str) -> int:
    if not is_int(index) or index < 0 or index >= size:
        raise SlotIndexError(kind, index, size)
    return index
