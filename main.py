"""
SkinLogic API Server Entry Point

Mounts the engine, tracking and mindset routers.

  uvicorn main:app --host 0.0.0.0 --port $PORT
"""

import logging
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from skinlogic import __version__
from skinlogic.config import API_PREFIX, ENGINE_VERSION, LOG_LEVEL, get_cors_origins
from skinlogic.engine.router import router as engine_router
from skinlogic.mindset.router import router as mindset_router
from skinlogic.tracking.router import router as tracking_router

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# ============================================
# App Configuration
# ============================================
app = FastAPI(
    title="SkinLogic API",
    description="Eczema severity scoring, supplement protocol and mindset engine",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(engine_router)
app.include_router(tracking_router)
app.include_router(mindset_router)

logger.info(f"SkinLogic API {__version__} (engine {ENGINE_VERSION}) mounted at {API_PREFIX}")


@app.get("/")
def root():
    return {
        "service": "SkinLogic API",
        "version": __version__,
        "engine_version": ENGINE_VERSION,
    }


@app.get("/health")
def health():
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}


# For local development
if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
