"""Upload endpoints for résumé and profile photo files."""

from fastapi import APIRouter, Depends, File, Request, UploadFile

from app.api.deps import get_current_identity, get_settings
from app.config import Settings
from app.core.authorization import Identity
from app.schemas.profile import UploadResponse
from app.services.upload_storage import UploadStorage

router = APIRouter()


def get_upload_storage(request: Request) -> UploadStorage:
    return request.app.state.upload_storage


@router.post("/resume", response_model=UploadResponse)
async def upload_resume(
    resume: UploadFile = File(...),
    identity: Identity = Depends(get_current_identity),
    storage: UploadStorage = Depends(get_upload_storage),
    settings: Settings = Depends(get_settings),
):
    """Store a résumé; the returned URL is saved on the profile by the client."""
    url = await storage.save(resume, "resume", settings.ALLOWED_RESUME_EXTENSIONS)
    return UploadResponse(url=url)


@router.post("/photo", response_model=UploadResponse)
async def upload_photo(
    photo: UploadFile = File(...),
    identity: Identity = Depends(get_current_identity),
    storage: UploadStorage = Depends(get_upload_storage),
    settings: Settings = Depends(get_settings),
):
    """Store a profile photo."""
    url = await storage.save(photo, "photo", settings.ALLOWED_PHOTO_EXTENSIONS)
    return UploadResponse(url=url)
