from .field_hooks import (
    FIELD_DEFAULTS,
    VALUES_TRIGGER_COLUMNS,
    pre_insert,
    post_insert,
    post_update,
    pre_cascade_delete,
)

__all__ = [
    "FIELD_DEFAULTS",
    "VALUES_TRIGGER_COLUMNS",
    "pre_insert",
    "post_insert",
    "post_update",
    "pre_cascade_delete",
]
