# catalog/schemas/field.py
from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel

from catalog.models.field_types import BaseType, FieldType, FKRelationship, SpecialType


class DatabaseSummary(BaseModel):
    id: int
    name: str
    engine: str

    class Config:
        from_attributes = True

class TableSummary(BaseModel):
    id: int
    db_id: int
    name: str

    class Config:
        from_attributes = True

class FieldSummary(BaseModel):
    """Just enough of a related Field (target, parent, fk ends) to link to it"""
    id: int
    table_id: int
    name: str
    qualified_name: str

    class Config:
        from_attributes = True

class FieldRead(BaseModel):
    """A Field with its derived attributes resolved"""
    id: int
    table_id: int
    parent_id: Optional[int] = None
    name: str
    description: Optional[str] = None
    base_type: BaseType
    special_type: Optional[SpecialType] = None
    field_type: FieldType
    position: int
    active: bool
    preview_display: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    # derived
    human_readable_name: Optional[str] = None
    qualified_name: str
    can_read: bool
    can_write: bool
    table: TableSummary
    db: DatabaseSummary
    target: Optional[FieldSummary] = None
    parent: Optional[FieldSummary] = None

    class Config:
        from_attributes = True

class FieldUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    base_type: Optional[BaseType] = None
    special_type: Optional[SpecialType] = None
    field_type: Optional[FieldType] = None
    position: Optional[int] = None
    active: Optional[bool] = None
    preview_display: Optional[bool] = None

    class Config:
        extra = "forbid"

class FieldNode(BaseModel):
    """One node of a table's nested field tree"""
    id: int
    table_id: int
    parent_id: Optional[int] = None
    name: str
    base_type: BaseType
    special_type: Optional[SpecialType] = None
    field_type: FieldType
    position: int
    active: bool
    preview_display: bool
    children: List["FieldNode"] = []

class FieldValuesRead(BaseModel):
    field_id: int
    values: List[Any]
    human_readable_values: Optional[Any] = None

    class Config:
        from_attributes = True

class ForeignKeyRead(BaseModel):
    id: int
    relationship: FKRelationship
    origin_id: int
    destination_id: int
    origin: Optional[FieldSummary] = None
    destination: Optional[FieldSummary] = None

    class Config:
        from_attributes = True

FieldNode.model_rebuild()
