"""
TipScan Backend: FastAPI application entry point.
"""
import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.tips.database import Base, SessionLocal, engine

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(name)-30s  %(levelname)-5s  %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: ensure data dir + tables exist
    os.makedirs(settings.DATA_DIR, exist_ok=True)
    # Import models so Base.metadata knows about them
    import app.tips.models  # noqa: F401
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ready (%s)", settings.DATABASE_URL)

    if settings.SEED_SAMPLE_TIPS:
        from app.tips.models import TipModel
        from app.tips.routers.tips import create_sample_tips
        db = SessionLocal()
        try:
            if db.query(TipModel).count() == 0:
                created = create_sample_tips(db)
                logger.info("Seeded %d sample tips", len(created))
        finally:
            db.close()

    yield
    logger.info("Shutting down")


app = FastAPI(
    title="TipScan",
    description="Receipt photo → OCR text → tip candidates → confirmed tips",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def root():
    return {"service": "TipScan", "version": "0.1.0", "status": "running"}


@app.get("/health")
async def health_check():
    return {"status": "healthy"}


# ── Register API routers ─────────────────────────────────────────────────
from app.tips.routers.scan import router as scan_router  # noqa: E402
from app.tips.routers.tips import router as tips_router  # noqa: E402

app.include_router(scan_router, prefix="/api", tags=["Receipt Scan"])
app.include_router(tips_router, prefix="/api", tags=["Tips"])
