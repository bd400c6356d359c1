# catalog/crud/__init__.py
from .field import field_crud, FieldCRUD
from . import foreign_key

__all__ = ["field_crud", "FieldCRUD", "foreign_key"]
