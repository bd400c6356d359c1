# File: catalog/models/__init__.py
from .base import Base
from .field_types import BaseType, SpecialType, FieldType, FKRelationship, SPECIAL_TYPE_NAMES
from .database import Database
from .table import Table
from .foreign_key import ForeignKey
from .field import Field
from .field_values import FieldValues

__all__ = [
    "Base",
    "BaseType",
    "SpecialType",
    "FieldType",
    "FKRelationship",
    "SPECIAL_TYPE_NAMES",
    "Database",
    "Table",
    "ForeignKey",
    "Field",
    "FieldValues",
]
