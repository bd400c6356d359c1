# catalog/api/api_v1/tables.py
from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from catalog.core.database import get_db
from catalog.crud import field_crud
from catalog.schemas import FieldNode

router = APIRouter()

@router.get("/table/{table_id}/fields", response_model=List[FieldNode])
def get_table_fields(
    table_id: int,
    include_inactive: bool = Query(False, description="Also return fields that are no longer active"),
    db: Session = Depends(get_db),
):
    """Fields of a table, nested fields moved into their parent's children."""
    return field_crud.get_table_field_tree(db, table_id, active_only=not include_inactive)
