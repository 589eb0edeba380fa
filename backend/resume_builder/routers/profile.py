"""
Profile Router - the user's own contact details, used as resume defaults
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from ..database import get_db
from ..models import User
from ..services.auth import get_current_user
from ..schemas.user import UserProfile, ProfileUpdate

router = APIRouter(prefix="/api/profile", tags=["Profile"])


@router.get("", response_model=UserProfile)
async def get_profile(current_user: User = Depends(get_current_user)):
    """Get the current user's profile"""
    return current_user


@router.put("", response_model=UserProfile)
async def update_profile(
    profile_data: ProfileUpdate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Update the current user's profile.
    Name and email are required; other blank fields are cleared.
    """
    if profile_data.email != current_user.email:
        result = await db.execute(
            select(User).where(User.email == profile_data.email, User.id != current_user.id)
        )
        if result.scalar_one_or_none():
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Email already in use"
            )

    current_user.name = profile_data.name.strip()
    current_user.email = profile_data.email
    current_user.bio = profile_data.bio or None
    current_user.location = profile_data.location or None
    current_user.phone = profile_data.phone or None
    current_user.linkedin_url = profile_data.linkedin_url or None
    current_user.github_url = profile_data.github_url or None
    current_user.portfolio_url = profile_data.portfolio_url or None
    current_user.preferences = profile_data.preferences or None

    await db.commit()
    await db.refresh(current_user)
    return current_user
