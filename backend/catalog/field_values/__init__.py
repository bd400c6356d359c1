from .values_manager import (
    FieldProjection,
    FieldValuesManager,
    delete_field_values,
    field_values_manager,
    should_have_field_values,
    summarize_distinct_values,
)

__all__ = [
    "FieldProjection",
    "FieldValuesManager",
    "delete_field_values",
    "field_values_manager",
    "should_have_field_values",
    "summarize_distinct_values",
]
