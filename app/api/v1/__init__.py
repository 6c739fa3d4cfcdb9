"""API v1 routes."""

from fastapi import APIRouter

from app.api.v1 import admin, auth, jobs, profile, uploads

api_router = APIRouter()

# Include all route modules
api_router.include_router(auth.router, prefix="/auth", tags=["Authentication"])
api_router.include_router(jobs.router, prefix="/jobs", tags=["Jobs"])
api_router.include_router(profile.router, prefix="/profile", tags=["Profile"])
api_router.include_router(uploads.router, prefix="/upload", tags=["Uploads"])
api_router.include_router(admin.router, prefix="/admin", tags=["Admin"])
