# personal_api/routers/resume.py
from fastapi import APIRouter, Depends

from personal_api.config import Settings
from personal_api.deps import get_settings
from personal_api.services.resume import resume_response

router = APIRouter(prefix="/api", tags=["resume"])


# plain def: FastAPI runs it in the threadpool
@router.get("/resume")
def get_resume(settings: Settings = Depends(get_settings)):
    return resume_response(settings.RESUME_PATH)
