"""FastAPI application for windaction.

Run with: uvicorn windaction.api:app --reload
"""

from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from windaction import __version__
from windaction.engine import calculate
from windaction.schemas import ProfileRequest, ProfileRow, WindActionInput, WindActionResult
from windaction.settings import LOG_FORMAT, get_settings
from windaction.tables import height_profile

settings = get_settings()
logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


@router.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


@router.post("/calculate", response_model=WindActionResult)
async def calculate_endpoint(request: WindActionInput):
    """
    Calculate the peak wind speed pressure.

    Args:
        request: WindActionInput with site and wind parameters

    Returns:
        WindActionResult with the pressure and factor breakdown

    Raises:
        HTTPException: 400 for inputs outside the standard's domain
    """
    try:
        return calculate(request)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Calculation error: {str(e)}")
    except Exception:
        logger.exception("Unexpected error during calculation")
        raise HTTPException(
            status_code=500, detail="An unexpected error occurred during calculation"
        )


@router.post("/profile", response_model=List[ProfileRow])
async def profile_endpoint(request: ProfileRequest):
    """
    Tabulate roughness, peak wind speed and pressure over several heights.

    Heights default to ``WINDACTION_PROFILE_HEIGHTS`` when omitted.
    """
    heights = request.heights_m or get_settings().profile_heights
    try:
        df = height_profile(request.inputs, heights)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Calculation error: {str(e)}")
    return df.to_dict(orient="records")


app = FastAPI(
    title="Windaction API",
    description="SANS 10160-3 peak wind speed pressure calculator",
    version=__version__,
)

# CORS - configurable via WINDACTION_CORS_ORIGINS env var
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Windaction API",
        "version": __version__,
        "endpoints": ["/api/calculate", "/api/profile", "/api/health"],
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
