"""Job endpoints - browse and post jobs."""

from typing import List, Literal, Optional

import structlog
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_identity
from app.core.authorization import Identity
from app.db.session import get_db
from app.models.job import Job
from app.schemas.job import JobCreate, JobResponse
from app.utils.helpers import detect_link_type

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.get("", response_model=List[JobResponse])
async def list_jobs(
    category: Optional[str] = Query(None, description="Exact category (e.g., 'IT')"),
    experience: Optional[str] = Query(None, description="Exact experience level (e.g., 'Entry Level')"),
    q: Optional[str] = Query(None, description="Case-insensitive match on title or company"),
    location: Optional[str] = Query(None, description="Case-insensitive partial match on location"),
    sort: Literal["newest", "oldest"] = Query("newest", description="Order by posting date"),
    db: AsyncSession = Depends(get_db),
):
    """
    List all job postings. Public, no authentication.

    **Filters:**
    - `category`, `experience`: exact match; "All"/"Any" are ignored
    - `q`: title or company contains the text
    - `location`: location contains the text
    """
    filters = []

    if category and category != "All":
        filters.append(Job.category == category)

    if experience and experience != "Any":
        filters.append(Job.experience == experience)

    if q and q.strip():
        text = q.strip().lower()
        filters.append(
            or_(
                func.lower(Job.title).contains(text, autoescape=True),
                func.lower(Job.company).contains(text, autoescape=True),
            )
        )

    if location and location.strip():
        filters.append(func.lower(Job.location).contains(location.strip().lower(), autoescape=True))

    order = Job.created_at.desc() if sort == "newest" else Job.created_at.asc()
    result = await db.execute(select(Job).where(*filters).order_by(order))
    return result.scalars().all()


@router.post("", response_model=JobResponse, status_code=status.HTTP_201_CREATED)
async def create_job(
    request: JobCreate,
    db: AsyncSession = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
):
    """Post a job attributed to the caller."""
    job = Job(
        title=request.title,
        company=request.company,
        category=request.category,
        location=request.location,
        experience=request.experience,
        salary=request.salary,
        requirements=request.requirements,
        link=request.link,
        link_type=request.link_type or detect_link_type(request.link),
        posted_by=request.posted_by or identity.username,
        user_id=identity.id,
    )
    db.add(job)
    await db.commit()
    await db.refresh(job)

    logger.info("job_posted", job_id=str(job.id), user_id=str(identity.id), category=job.category)
    return job
