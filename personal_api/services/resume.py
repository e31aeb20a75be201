# personal_api/services/resume.py
import logging
from pathlib import Path

from fastapi import Response
from fastapi.responses import JSONResponse

log = logging.getLogger(__name__)

PDF_MEDIA_TYPE = "application/pdf"


def resume_response(pdf_path: str) -> Response:
    """Whole file buffered in memory; no ranges, no caching headers."""
    path = Path(pdf_path)
    if not path.exists():
        log.warning("Resume not found at %s", path)
        return JSONResponse({"error": "Resume not found"}, status_code=404)

    try:
        data = path.read_bytes()
    except OSError as e:
        log.error("Failed to read resume at %s: %s", path, e)
        return JSONResponse({"error": "Failed to read resume"}, status_code=500)

    return Response(content=data, media_type=PDF_MEDIA_TYPE)
