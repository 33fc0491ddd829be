from __future__ import annotations

from typing import Any

from ..core.exceptions import ValidationError


def require_non_empty(value: Any, message: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(message)
    return value.strip()


def require_user_id(value: Any) -> int:
    """Accept ints or numeric strings coming from JSON bodies and URL paths."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError("userId requerido")
    if isinstance(value, bool):
        raise ValidationError("userId inválido")
    try:
        user_id = int(str(value).strip())
    except ValueError:
        raise ValidationError("userId inválido")
    if user_id <= 0:
        raise ValidationError("userId inválido")
    return user_id


def require_max_length(value: str, message: str, max_len: int) -> str:
    if len(value) > max_len:
        raise ValidationError(message)
    return value
