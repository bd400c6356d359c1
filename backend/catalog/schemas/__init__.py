# catalog/schemas/__init__.py
from .field import (
    DatabaseSummary,
    TableSummary,
    FieldSummary,
    FieldRead,
    FieldUpdate,
    FieldNode,
    FieldValuesRead,
    ForeignKeyRead,
)
