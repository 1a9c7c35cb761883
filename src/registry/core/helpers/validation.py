"""Request body validation against a declared record schema.

A schema is an ordered list of :class:`FieldSpec`. Validation never raises:
the outcome is described by a :class:`ValidationResult` and callers branch on
``is_valid``. Only the fields reported valid are forwarded to persistence, so
clients cannot set base fields such as ``recStatus`` or the audit stamps.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel


@dataclass(frozen=True)
class FieldSpec:
    name: str
    required: bool = False


@dataclass
class ValidationResult:
    is_valid: bool
    valid_fields: list[str] = field(default_factory=list)
    missing_fields: list[str] = field(default_factory=list)


def schema_for(model: type[BaseModel]) -> list[FieldSpec]:
    """Derive a schema from a pydantic model, keyed by the wire alias."""
    return [
        FieldSpec(name=info.alias or name, required=info.is_required())
        for name, info in model.model_fields.items()
    ]


def _valid_fields(payload: Mapping[str, Any], schema: list[FieldSpec]) -> list[str]:
    declared = {spec.name for spec in schema}
    return [key for key in payload if key in declared]


def validate_add_record(
    payload: Mapping[str, Any], schema: list[FieldSpec]
) -> ValidationResult:
    """Check a body for record creation.

    A required field counts as supplied whenever its key is present, even
    with a ``None`` or empty value.
    """
    missing = [spec.name for spec in schema if spec.required and spec.name not in payload]
    return ValidationResult(
        is_valid=not missing,
        valid_fields=_valid_fields(payload, schema),
        missing_fields=missing,
    )


def validate_update_record(
    payload: Mapping[str, Any], schema: list[FieldSpec]
) -> ValidationResult:
    """Check a body for a partial update: at least one declared field is needed."""
    valid = _valid_fields(payload, schema)
    return ValidationResult(is_valid=bool(valid), valid_fields=valid)


def get_object_with_valid_fields(
    payload: Mapping[str, Any], valid_fields: list[str]
) -> dict[str, Any]:
    """Copy only the accepted keys of ``payload``, in ``valid_fields`` order."""
    return {key: payload[key] for key in valid_fields if key in payload}
