"""
Render schemas - the canonical, template-agnostic view of one resume.

Built fresh for every export request by services.resume_normalizer and
never persisted. All models are frozen.
"""
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator


class PersonalInfoOverrides(BaseModel):
    """
    The optional ``personalInfo`` object embedded in a resume's content blob.

    Every field is optional; a value that is missing, blank or of the wrong
    type is treated as absent so that the owner's profile (or an empty
    string) takes over.
    """
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    summary: Optional[str] = None
    website: Optional[str] = None
    linkedin: Optional[str] = None
    github: Optional[str] = None

    class Config:
        extra = "ignore"
        frozen = True

    @field_validator("*", mode="before")
    @classmethod
    def coerce_to_text(cls, value):
        if isinstance(value, bool):
            return None
        if isinstance(value, (int, float)):
            return str(value)
        if isinstance(value, str):
            return value.strip() or None
        return None


class OwnerProfile(BaseModel):
    """Profile fields of the resume owner used as personal-info fallbacks"""
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    portfolio_url: Optional[str] = None
    linkedin_url: Optional[str] = None

    class Config:
        from_attributes = True
        frozen = True


class PersonalInfo(BaseModel):
    name: str = ""
    email: str = ""
    phone: str = ""
    city: str = ""
    state: str = ""
    summary: str = ""
    website: str = ""
    linkedin: str = ""
    github: str = ""

    class Config:
        frozen = True


class SkillRating(BaseModel):
    skill_name: str
    rating: int = Field(default=0, ge=0, le=10)

    class Config:
        frozen = True


class WorkEntry(BaseModel):
    company: str = ""
    position: str = ""
    start_date: str = ""  # YYYY-MM-DD
    end_date: Optional[str] = None  # YYYY-MM-DD
    current: bool = False
    bullet_points: List[str] = Field(default_factory=list)

    class Config:
        frozen = True


class EducationEntry(BaseModel):
    institution: str = ""
    degree: str = ""
    field: str = ""
    start_date: str = ""
    end_date: Optional[str] = None
    current: bool = False
    gpa: Optional[float] = None

    class Config:
        frozen = True


class CourseEntry(BaseModel):
    title: str = ""
    provider: str = ""
    link: Optional[str] = None

    class Config:
        frozen = True


class InterestEntry(BaseModel):
    name: str = ""
    icon: str = ""

    class Config:
        frozen = True


class CanonicalRenderModel(BaseModel):
    title: str
    job_title: str = ""
    profile_picture: Optional[str] = None
    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    strengths: List[SkillRating] = Field(default_factory=list)
    work_experience: List[WorkEntry] = Field(default_factory=list)
    education: List[EducationEntry] = Field(default_factory=list)
    courses: List[CourseEntry] = Field(default_factory=list)
    interests: List[InterestEntry] = Field(default_factory=list)

    class Config:
        frozen = True
