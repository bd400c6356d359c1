from fastapi import APIRouter
from catalog.api.api_v1 import fields, tables


api_router = APIRouter()

api_router.include_router(fields.router, prefix="", tags=["fields"])
api_router.include_router(tables.router, prefix="", tags=["tables"])
