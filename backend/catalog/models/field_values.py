# File: catalog/models/field_values.py
from sqlalchemy import JSON, Column, ForeignKey, Integer
from catalog.models.base import Base, TimestampMixin

class FieldValues(TimestampMixin, Base):
    """Precomputed distinct values of a Field, used for filter widgets and suggestions."""
    __tablename__ = "metabase_fieldvalues"

    id = Column(Integer, primary_key=True, index=True)
    field_id = Column(Integer, ForeignKey("metabase_field.id"), nullable=False, unique=True, index=True)
    values = Column(JSON, nullable=False, default=list)
    human_readable_values = Column(JSON, nullable=True)
