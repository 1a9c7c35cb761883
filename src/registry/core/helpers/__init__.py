"""Request filter, projection, validation and response helpers."""

from .filters import FilterRule, FiltersMeta, update_filters
from .response import ApiResponse, response_structure
from .select import (
    Projection,
    SelectMeta,
    SelectMetas,
    get_clean_object,
    get_select_string,
    parse_select_string,
)
from .validation import (
    FieldSpec,
    ValidationResult,
    get_object_with_valid_fields,
    schema_for,
    validate_add_record,
    validate_update_record,
)

__all__ = [
    "ApiResponse",
    "FieldSpec",
    "FilterRule",
    "FiltersMeta",
    "Projection",
    "SelectMeta",
    "SelectMetas",
    "ValidationResult",
    "get_clean_object",
    "get_object_with_valid_fields",
    "get_select_string",
    "parse_select_string",
    "response_structure",
    "schema_for",
    "update_filters",
    "validate_add_record",
    "validate_update_record",
]
