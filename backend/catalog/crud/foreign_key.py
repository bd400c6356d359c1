# catalog/crud/foreign_key.py
from sqlalchemy import select
from sqlalchemy.orm import Session
from catalog.models import Field, ForeignKey, FKRelationship

def create(
    db: Session,
    origin_id: int,
    destination_id: int,
    relationship: FKRelationship = FKRelationship.many_to_one,
) -> ForeignKey:
    fk = ForeignKey(origin_id=origin_id, destination_id=destination_id, relationship=relationship)
    db.add(fk)
    db.commit()
    db.refresh(fk)
    return fk

def get_origin(db: Session, fk: ForeignKey) -> Field | None:
    return db.get(Field, fk.origin_id)

def get_destination(db: Session, fk: ForeignKey) -> Field | None:
    return db.get(Field, fk.destination_id)

def get_by_origin(db: Session, origin_id: int) -> list[ForeignKey]:
    return list(db.scalars(select(ForeignKey).where(ForeignKey.origin_id == origin_id).order_by(ForeignKey.id)))
