# File: catalog/models/database.py
from sqlalchemy import Column, Integer, String
from catalog.models.base import Base, TimestampMixin

class Database(TimestampMixin, Base):
    __tablename__ = "metabase_database"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(254), nullable=False)
    engine = Column(String(254), nullable=False, default="postgres")
