"""
Resumes Router - resume CRUD and profile picture handling
"""
import base64
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, UploadFile, File, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.orm import selectinload

from ..config import get_settings
from ..database import get_db
from ..models import User, Resume, Strength, WorkExperience, Education, Course, Interest
from ..services.auth import get_current_user
from ..schemas.resume import (
    ResumeCreate, ResumeUpdate, ResumeResponse, ResumeSummary,
    ProfilePictureUploadResponse
)

router = APIRouter(prefix="/api/resumes", tags=["Resumes"])
settings = get_settings()
logger = logging.getLogger(__name__)

ALLOWED_PICTURE_TYPES = {"image/png", "image/jpeg", "image/jpg", "image/heic", "image/heif"}

# Payload field (same name as the relationship) -> child model
CHILD_COLLECTIONS = {
    "strengths": Strength,
    "work_experience": WorkExperience,
    "education": Education,
    "courses": Course,
    "interests": Interest,
}


# ============================================================================
# Helper Functions
# ============================================================================

async def get_resume_with_relations(db: AsyncSession, resume_id: int, user_id: int) -> Optional[Resume]:
    """Get one of the user's resumes with every collection loaded."""
    result = await db.execute(
        select(Resume)
        .options(
            selectinload(Resume.strengths),
            selectinload(Resume.work_experience),
            selectinload(Resume.education),
            selectinload(Resume.courses),
            selectinload(Resume.interests),
        )
        .where(Resume.id == resume_id, Resume.user_id == user_id)
        .execution_options(populate_existing=True)
    )
    return result.scalar_one_or_none()


async def get_resume_or_404(db: AsyncSession, resume_id: int, user_id: int) -> Resume:
    resume = await get_resume_with_relations(db, resume_id, user_id)
    if not resume:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Resume not found"
        )
    return resume


def build_children(field: str, items: list) -> list:
    model = CHILD_COLLECTIONS[field]
    return [model(**item.model_dump()) for item in items]


# ============================================================================
# Resume Endpoints
# ============================================================================

@router.get("", response_model=List[ResumeSummary])
async def list_resumes(
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Get the current user's resumes, newest first"""
    result = await db.execute(
        select(Resume)
        .options(selectinload(Resume.strengths))
        .where(Resume.user_id == current_user.id)
        .order_by(Resume.id.desc())
    )
    return result.scalars().all()


@router.post("", response_model=ResumeResponse, status_code=status.HTTP_201_CREATED)
async def create_resume(
    resume_data: ResumeCreate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Create a resume, optionally with its collections"""
    resume = Resume(
        user_id=current_user.id,
        title=resume_data.title,
        content=resume_data.content,
        job_title=resume_data.job_title,
        template=resume_data.template,
        profile_picture=resume_data.profile_picture,
    )
    for field in CHILD_COLLECTIONS:
        setattr(resume, field, build_children(field, getattr(resume_data, field)))

    db.add(resume)
    await db.commit()

    logger.info("Created resume %s for user %s", resume.id, current_user.id)
    return await get_resume_or_404(db, resume.id, current_user.id)


@router.get("/{resume_id}", response_model=ResumeResponse)
async def get_resume(
    resume_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Get a resume with all of its collections"""
    return await get_resume_or_404(db, resume_id, current_user.id)


@router.put("/{resume_id}", response_model=ResumeResponse)
async def update_resume(
    resume_id: int,
    resume_data: ResumeUpdate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Update a resume.
    Only fields that are sent are changed; a collection that is sent
    replaces the stored one.
    """
    resume = await get_resume_or_404(db, resume_id, current_user.id)
    updates = resume_data.model_dump(exclude_unset=True)

    for field in ("title", "content", "job_title", "template", "profile_picture"):
        if field in updates:
            setattr(resume, field, updates[field])

    for field in CHILD_COLLECTIONS:
        if field in updates and updates[field] is not None:
            setattr(resume, field, build_children(field, getattr(resume_data, field)))

    await db.commit()
    return await get_resume_or_404(db, resume_id, current_user.id)


@router.delete("/{resume_id}")
async def delete_resume(
    resume_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Delete a resume and everything in it"""
    resume = await get_resume_or_404(db, resume_id, current_user.id)
    await db.delete(resume)
    await db.commit()

    logger.info("Deleted resume %s for user %s", resume_id, current_user.id)
    return {"message": "Resume deleted successfully"}


# ============================================================================
# Profile Picture Endpoints
# ============================================================================

@router.post("/upload-profile-picture", response_model=ProfilePictureUploadResponse)
async def upload_profile_picture(
    file: UploadFile = File(...),
    current_user: User = Depends(get_current_user)
):
    """
    Convert an uploaded image to a data URI.
    The client stores the returned value on the resume; nothing is written
    to disk, so the picture renders anywhere without file access.
    """
    if file.content_type not in ALLOWED_PICTURE_TYPES:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Only PNG, JPG, or HEIC/HEIF allowed"
        )

    image_bytes = await file.read()

    if len(image_bytes) > settings.max_profile_picture_bytes:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"File size must be less than {settings.max_profile_picture_bytes // (1024 * 1024)}MB"
        )

    encoded = base64.b64encode(image_bytes).decode("ascii")
    return ProfilePictureUploadResponse(file_path=f"data:{file.content_type};base64,{encoded}")


@router.post("/{resume_id}/clear-profile-picture")
async def clear_profile_picture(
    resume_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Remove the stored profile picture reference"""
    resume = await get_resume_or_404(db, resume_id, current_user.id)
    resume.profile_picture = ""
    await db.commit()
    return {"success": True}
