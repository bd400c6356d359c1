import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text

from catalog.core.config import settings
from catalog.core.database import SessionLocal, engine
from catalog.core.tasks import background_dispatcher
from catalog.api.api_v1.api import api_router
from catalog.models import Base

# Initialize logger for uvicorn
uvicorn_logger = logging.getLogger("uvicorn")

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup and shutdown events."""
    try:
        uvicorn_logger.info("🚀 Starting field metadata API initialization...")
        uvicorn_logger.info("🛠️ Creating database schema...")
        Base.metadata.create_all(bind=engine)
        uvicorn_logger.info("✅ Database schema ready")
    except Exception as e:
        uvicorn_logger.error(f"🔥 Startup error: {e}")
        raise

    yield

    uvicorn_logger.info("⏳ Waiting for background FieldValues tasks to finish...")
    background_dispatcher.shutdown(wait=True)
    uvicorn_logger.info("👋 Field metadata API stopped")

# FastAPI app setup
app = FastAPI(
    title="Field Metadata API",
    description="Fields of synced tables: types, nesting, foreign keys and value summaries",
    version="1.0.0",
    lifespan=lifespan
)

# CORS Middleware Setup
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API Router Setup
app.include_router(api_router, prefix="/api/v1")

@app.get("/health")
def health_check():
    """Health check endpoint."""
    try:
        with SessionLocal() as db:
            db.execute(text("SELECT 1"))
        return {"status": "healthy", "version": "1.0.0"}
    except Exception as e:
        return {"status": "error", "error": str(e), "version": "1.0.0"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
