# catalog/api/api_v1/fields.py
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from catalog.core.database import get_db
from catalog.core.exceptions import NotFound, ValidationError
from catalog.crud import field_crud
from catalog.crud import foreign_key as fk_crud
from catalog.models import SPECIAL_TYPE_NAMES
from catalog.schemas import FieldRead, FieldSummary, FieldUpdate, FieldValuesRead, ForeignKeyRead

router = APIRouter()

def _summary(field) -> Optional[FieldSummary]:
    return FieldSummary.model_validate(field) if field is not None else None

@router.get("/field/special-types", response_model=Dict[str, str])
def get_special_types():
    """User-facing names of the special types."""
    return {special_type.value: label for special_type, label in SPECIAL_TYPE_NAMES.items()}

@router.get("/field/{field_id}", response_model=FieldRead)
def get_field(field_id: int, db: Session = Depends(get_db)):
    """Get a field with its table, database, target and names resolved."""
    try:
        field = field_crud.get(db, field_id)
        return FieldRead.model_validate(field)
    except NotFound as e:
        raise HTTPException(status_code=404, detail=str(e))

@router.put("/field/{field_id}", response_model=FieldRead)
def update_field(field_id: int, payload: FieldUpdate, db: Session = Depends(get_db)):
    try:
        field = field_crud.update(db, field_id, payload.model_dump(exclude_unset=True))
        return FieldRead.model_validate(field)
    except NotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))

@router.delete("/field/{field_id}")
def delete_field(field_id: int, db: Session = Depends(get_db)):
    """Delete a field along with its nested fields, foreign keys and values."""
    try:
        field_crud.delete(db, field_id)
    except NotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"success": True}

@router.get("/field/{field_id}/values", response_model=FieldValuesRead)
def get_field_values(field_id: int, db: Session = Depends(get_db)):
    """Distinct values of a field. Empty until the background task has stored them."""
    try:
        field_values = field_crud.get_values(db, field_id)
    except NotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    if field_values is None:
        return FieldValuesRead(field_id=field_id, values=[])
    return field_values

@router.get("/field/{field_id}/foreignkeys", response_model=List[ForeignKeyRead])
def get_field_foreign_keys(field_id: int, db: Session = Depends(get_db)):
    """Foreign keys originating at a field, with both ends hydrated."""
    try:
        field_crud.get(db, field_id)
        return [
            ForeignKeyRead(
                id=fk.id,
                relationship=fk.relationship,
                origin_id=fk.origin_id,
                destination_id=fk.destination_id,
                origin=_summary(fk_crud.get_origin(db, fk)),
                destination=_summary(fk_crud.get_destination(db, fk)),
            )
            for fk in fk_crud.get_by_origin(db, field_id)
        ]
    except NotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
