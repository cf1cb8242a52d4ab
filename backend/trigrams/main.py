import logging
from fastapi import Depends, FastAPI

from trigrams.api.api_v1.api import api_router
from trigrams.api.api_v1.trigrams import get_settings
from trigrams.core.config import Settings
from trigrams.settings import APIConfig

# Initialize logger for uvicorn
uvicorn_logger = logging.getLogger("uvicorn")

# FastAPI app setup
app = FastAPI(
    title=APIConfig.TITLE,
    description=APIConfig.DESCRIPTION,
    version=APIConfig.VERSION,
)

# API Router Setup
app.include_router(api_router, prefix="/api/v1")

@app.get("/")
def read_root():
    """Root endpoint with API information."""
    return {
        "message": "Trigram Counter API is running!",
        "version": APIConfig.VERSION,
        "features": [
            "Three word sequence counting",
            "Combined and individual source ranking",
            "Tokenization preview",
        ],
        "docs": "/docs",
        "health": "/health"
    }

@app.get("/health")
def health_check(current: Settings = Depends(get_settings)):
    """Health check with the active counting settings."""
    return {
        "status": "healthy",
        "version": APIConfig.VERSION,
        "settings": {
            "top_k": current.TOP_K,
            "mode": current.mode,
            "include_final_trigram": current.INCLUDE_FINAL_TRIGRAM,
        },
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn_logger.info("🚀 Starting Trigram Counter API...")
    uvicorn.run(app, host="0.0.0.0", port=8000)
