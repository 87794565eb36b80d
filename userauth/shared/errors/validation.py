# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any, NoReturn

from pydantic import ValidationError as PydanticValidationError
from pydantic_core import ErrorDetails

from .base import ValidationError

_JSON_SCALARS = (str, int, float, bool, type(None))


def _field_name(error: ErrorDetails) -> str:
    return ".".join(str(part) for part in error["loc"]) or "body"


def _describe(error: ErrorDetails) -> dict[str, Any]:
    entry: dict[str, Any] = {
        "field": _field_name(error),
        "type": error["type"],
        "message": error["msg"],
    }
    ctx = error.get("ctx")
    if ctx:
        entry["ctx"] = {
            key: value if isinstance(value, _JSON_SCALARS) else str(value)
            for key, value in ctx.items()
        }
    return entry


def format_pydantic_errors(exc: PydanticValidationError) -> dict[str, Any]:
    """Flatten pydantic errors into ``{"fields": [...], "errors": [...]}``.

    ``fields`` is sorted and de-duplicated; ``errors`` keeps pydantic's order
    so a client can show every failing rule, not only the first.
    """
    errors = [_describe(error) for error in exc.errors(include_url=False)]
    return {
        "fields": sorted({entry["field"] for entry in errors}),
        "errors": errors,
    }


def raise_validation_error(exc: PydanticValidationError) -> NoReturn:
    raise ValidationError(context=format_pydantic_errors(exc)) from exc


__all__ = ["format_pydantic_errors", "raise_validation_error"]
