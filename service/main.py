"""
FastAPI service for grcam-core

Exposes GR camera detection as HTTP API for language-agnostic access.
"""

import logging
from typing import Optional

from fastapi import FastAPI, File, Form, HTTPException, Query, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from grcam_core import (
    DetectionError,
    DetectionResult,
    DetectorConfig,
    MetadataAbsentError,
    __version__,
    detect_from_filename_only,
    detect_from_source,
)

logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="GRCam Core API",
    description="Detects photos taken with Ricoh GR cameras from EXIF metadata and filenames",
    version=__version__,
)

# CORS - allow frontends to call this service
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure based on deployment
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class DetectionResponse(BaseModel):
    """Detection result as JSON"""
    is_match: bool
    model: Optional[str] = None
    method: str
    camera_make: Optional[str] = None
    camera_model: Optional[str] = None
    status: str
    error: Optional[str] = None
    used_fallback: bool = False
    is_confirmed: bool = False

    @classmethod
    def from_result(cls, result: DetectionResult) -> "DetectionResponse":
        return cls(**result.to_dict())


class ErrorResponse(BaseModel):
    """Error response"""
    error: str
    detail: Optional[str] = None


# API Endpoints
@app.get("/")
def root():
    """API root - health check"""
    return {
        "service": "GRCam Core API",
        "version": __version__,
        "status": "healthy"
    }


@app.post(
    "/v1/detect",
    response_model=DetectionResponse,
    responses={400: {"model": ErrorResponse}, 422: {"model": ErrorResponse}}
)
async def detect_endpoint(
    file: UploadFile = File(..., description="Image file to check"),
    filename: Optional[str] = Form(None, description="Original filename. Defaults to the uploaded file's name."),
    strict: bool = Form(False, description="Raise detection errors instead of falling back to the filename")
):
    """
    Check whether an uploaded image was taken with a Ricoh GR camera.

    Upload image via multipart/form-data (standard file upload).

    In default mode, EXIF failures are reported in the response and the
    filename is used as a fallback. In strict mode they become HTTP errors.

    Args:
        file: Uploaded image file (multipart/form-data)
        filename: Optional filename override (form field)
        strict: Use DetectorConfig.strict() (form field)

    Returns:
        DetectionResponse

    Raises:
        HTTPException 400: Empty upload or unreadable EXIF (strict mode)
        HTTPException 422: Image has no EXIF (strict mode)

    Example:
        curl -X POST http://localhost:8765/v1/detect \\
          -F "file=@R0001234.JPG" \\
          -F "strict=true"
    """
    image_bytes = await file.read()
    config = DetectorConfig.strict() if strict else DetectorConfig.default()

    try:
        result = detect_from_source(
            image_bytes,
            filename=filename or file.filename,
            config=config,
        )
    except MetadataAbsentError as e:
        raise HTTPException(status_code=422, detail=e.message)
    except DetectionError as e:
        logger.info("Detection failed for %s: %s", file.filename, e)
        raise HTTPException(status_code=400, detail=str(e))

    return DetectionResponse.from_result(result)


@app.get("/v1/detect/filename", response_model=DetectionResponse)
def detect_filename_endpoint(
    name: str = Query(..., description="Filename or path to check, e.g. R0001234.JPG")
):
    """
    Filename-only detection.

    The result is never confirmed; other cameras use similar names.
    """
    return DetectionResponse.from_result(detect_from_filename_only(name))


@app.get("/health")
def health_check():
    """Health check endpoint for monitoring"""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8765)
