"""
Resume schemas for CRUD requests and responses
"""
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field, field_validator
from datetime import date, datetime


# ============================================================================
# Child collection schemas
# ============================================================================

class BulletPoint(BaseModel):
    description: str


class StrengthCreate(BaseModel):
    skill_name: str = Field(..., min_length=1, max_length=100)
    rating: int = Field(default=0, ge=0, le=10)


class StrengthResponse(StrengthCreate):
    id: int

    class Config:
        from_attributes = True


class WorkExperienceCreate(BaseModel):
    company: str
    position: str
    city: Optional[str] = None
    state: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    current: bool = False
    bullet_points: List[BulletPoint] = Field(default_factory=list)


class WorkExperienceResponse(BaseModel):
    id: int
    company: str
    position: str
    city: Optional[str] = None
    state: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    current: bool = False
    # Legacy rows may hold bare strings here
    bullet_points: Optional[Any] = None

    class Config:
        from_attributes = True


class EducationCreate(BaseModel):
    institution: str
    degree: Optional[str] = None
    field: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    current: bool = False
    gpa: Optional[float] = None


class EducationResponse(EducationCreate):
    id: int

    class Config:
        from_attributes = True


class CourseCreate(BaseModel):
    title: str
    provider: Optional[str] = None
    link: Optional[str] = None


class CourseResponse(CourseCreate):
    id: int

    class Config:
        from_attributes = True


class InterestCreate(BaseModel):
    name: str
    icon: Optional[str] = None


class InterestResponse(InterestCreate):
    id: int

    class Config:
        from_attributes = True


# ============================================================================
# Resume schemas
# ============================================================================

def _clean_title(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("title cannot be blank")
    return value


class ResumeCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    content: Dict[str, Any]
    job_title: Optional[str] = None
    template: Optional[str] = None
    profile_picture: Optional[str] = None
    strengths: List[StrengthCreate] = Field(default_factory=list)
    work_experience: List[WorkExperienceCreate] = Field(default_factory=list)
    education: List[EducationCreate] = Field(default_factory=list)
    courses: List[CourseCreate] = Field(default_factory=list)
    interests: List[InterestCreate] = Field(default_factory=list)

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        return _clean_title(value)


class ResumeUpdate(BaseModel):
    """Partial update - a child collection that is sent replaces the stored one"""
    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    content: Optional[Dict[str, Any]] = None
    job_title: Optional[str] = None
    template: Optional[str] = None
    profile_picture: Optional[str] = None
    strengths: Optional[List[StrengthCreate]] = None
    work_experience: Optional[List[WorkExperienceCreate]] = None
    education: Optional[List[EducationCreate]] = None
    courses: Optional[List[CourseCreate]] = None
    interests: Optional[List[InterestCreate]] = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: Optional[str]) -> str:
        # Explicit null would clear a NOT NULL column
        if value is None:
            raise ValueError("title cannot be null")
        return _clean_title(value)


class ResumeSummary(BaseModel):
    """List view"""
    id: int
    title: str
    job_title: Optional[str] = None
    template: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    strengths: List[StrengthResponse] = Field(default_factory=list)

    class Config:
        from_attributes = True


class ResumeResponse(ResumeSummary):
    """Full resume with all collections"""
    user_id: int
    profile_picture: Optional[str] = None
    content: Optional[Any] = None
    work_experience: List[WorkExperienceResponse] = Field(default_factory=list)
    education: List[EducationResponse] = Field(default_factory=list)
    courses: List[CourseResponse] = Field(default_factory=list)
    interests: List[InterestResponse] = Field(default_factory=list)


class ProfilePictureUploadResponse(BaseModel):
    file_path: str
