# File: catalog/models/foreign_key.py
from sqlalchemy import Column, Enum, ForeignKey as SqlForeignKey, Index, Integer
from catalog.models.base import Base, TimestampMixin
from catalog.models.field_types import FKRelationship

class ForeignKey(TimestampMixin, Base):
    """A directed relation from one Field (origin) to another (destination)."""
    __tablename__ = "metabase_foreignkey"

    id = Column(Integer, primary_key=True, index=True)
    origin_id = Column(Integer, SqlForeignKey("metabase_field.id"), nullable=False)
    destination_id = Column(Integer, SqlForeignKey("metabase_field.id"), nullable=False)
    relationship = Column(
        Enum(FKRelationship, native_enum=False, length=3, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=FKRelationship.many_to_one,
    )

    __table_args__ = (
        Index("idx_foreignkey_origin", "origin_id"),
        Index("idx_foreignkey_destination", "destination_id"),
    )
