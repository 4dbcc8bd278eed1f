import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ladder.config import LOG_LEVEL
from ladder.database import init_db
from ladder.routes import play

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

APP_NAME = "Ladder Organizer API"

app = FastAPI(title=APP_NAME)

_cors_origins = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]
_extra = os.getenv("CORS_ORIGINS", "")
if _extra:
    _cors_origins.extend(o.strip() for o in _extra.split(",") if o.strip())

app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(play.router, prefix="/api", tags=["play"])


@app.on_event("startup")
def on_startup():
    init_db()  # Use centralized init_db() which imports models and creates tables
    logger.info("%s started, %d routes registered", APP_NAME, len(app.routes))


@app.get("/api/health")
def health_check():
    """Diagnostic endpoint to verify the API is up"""
    return {"app_name": APP_NAME, "status": "healthy"}
