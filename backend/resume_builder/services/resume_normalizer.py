"""
Resume Data Normalizer - persisted resume + owner profile -> CanonicalRenderModel

Persisted resumes are only loosely validated: the content blob may be
missing or malformed, dates may be native or strings, and bullet points have
been stored in more than one shape. Nothing in here raises on bad data;
every field falls back to a defined default instead.
"""
import enum
import json
import logging
from datetime import date, datetime
from typing import Any, List, Optional

from ..schemas.render import (
    CanonicalRenderModel, PersonalInfo, PersonalInfoOverrides, OwnerProfile,
    SkillRating, WorkEntry, EducationEntry, CourseEntry, InterestEntry
)

logger = logging.getLogger(__name__)

FALLBACK_TEMPLATE = "modern"
MAX_RATING = 10


class DateStyle(str, enum.Enum):
    ISO = "iso"          # YYYY-MM-DD, stored in the render model
    DISPLAY = "display"  # MM/YYYY, shown on the page


# ============================================================================
# Dates
# ============================================================================

def _parse_date(value: Any) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    text = value.strip()
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        pass
    for fmt in ("%Y-%m", "%m/%Y"):
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


def format_date(value: Any, style: DateStyle = DateStyle.ISO) -> str:
    """
    Format a date, datetime or date string.

    Missing values give "". A string that cannot be parsed is returned
    unchanged so that free-form values such as "Summer 2020" still show up.
    """
    if value is None or value == "":
        return ""

    parsed = _parse_date(value)
    if parsed is None:
        if isinstance(value, str):
            return value
        logger.warning("Unsupported date value %r, dropping it", value)
        return ""

    if style == DateStyle.DISPLAY:
        return f"{parsed.month:02d}/{parsed.year}"
    return parsed.isoformat()


def _optional_date(value: Any) -> Optional[str]:
    return format_date(value, DateStyle.ISO) or None


# ============================================================================
# Personal info
# ============================================================================

def parse_personal_info(content: Any) -> PersonalInfoOverrides:
    """Read content["personalInfo"]; anything unexpected yields an empty override set."""
    if isinstance(content, (str, bytes)):
        try:
            content = json.loads(content)
        except ValueError:
            logger.warning("Resume content is not valid JSON, ignoring it")
            return PersonalInfoOverrides()

    if not isinstance(content, dict):
        return PersonalInfoOverrides()

    raw = content.get("personalInfo")
    if not isinstance(raw, dict):
        return PersonalInfoOverrides()
    return PersonalInfoOverrides.model_validate(raw)


def merge_personal_info(overrides: PersonalInfoOverrides, owner: Optional[OwnerProfile]) -> PersonalInfo:
    """
    Resolve each field: resume content first, then the owner's profile,
    then "". state, summary and github have no profile counterpart.
    """
    owner = owner or OwnerProfile()

    def pick(value: Optional[str], fallback: Optional[str] = None) -> str:
        return value or fallback or ""

    return PersonalInfo(
        name=pick(overrides.name, owner.name),
        email=pick(overrides.email, owner.email),
        phone=pick(overrides.phone, owner.phone),
        city=pick(overrides.city, owner.location),
        state=pick(overrides.state),
        summary=pick(overrides.summary),
        website=pick(overrides.website, owner.portfolio_url),
        linkedin=pick(overrides.linkedin, owner.linkedin_url),
        github=pick(overrides.github),
    )


# ============================================================================
# Collections
# ============================================================================

def normalize_bullet_points(raw: Any) -> List[str]:
    if not isinstance(raw, list):
        if raw is not None:
            logger.warning("Bullet points stored as %s, expected a list", type(raw).__name__)
        return []

    points = []
    for item in raw:
        if isinstance(item, dict):
            text = item.get("description")
        else:
            text = item
        if isinstance(text, str) and text.strip():
            points.append(text.strip())
    return points


def _rating(value: Any) -> int:
    try:
        rating = int(value or 0)
    except (TypeError, ValueError):
        return 0
    return max(0, min(MAX_RATING, rating))


def _strengths(items) -> List[SkillRating]:
    return [
        SkillRating(skill_name=item.skill_name.strip(), rating=_rating(item.rating))
        for item in items or []
        if item.skill_name and item.skill_name.strip()
    ]


def _work_experience(items) -> List[WorkEntry]:
    entries = []
    for work in items or []:
        current = bool(work.current)
        entries.append(WorkEntry(
            company=work.company or "",
            position=work.position or "",
            start_date=format_date(work.start_date, DateStyle.ISO),
            end_date=None if current else _optional_date(work.end_date),
            current=current,
            bullet_points=normalize_bullet_points(work.bullet_points),
        ))
    return entries


def _education(items) -> List[EducationEntry]:
    entries = []
    for edu in items or []:
        current = bool(edu.current)
        entries.append(EducationEntry(
            institution=edu.institution or "",
            degree=edu.degree or "",
            field=edu.field or "",
            start_date=format_date(edu.start_date, DateStyle.ISO),
            end_date=None if current else _optional_date(edu.end_date),
            current=current,
            gpa=edu.gpa or None,
        ))
    return entries


def _courses(items) -> List[CourseEntry]:
    return [
        CourseEntry(title=course.title or "", provider=course.provider or "", link=course.link or None)
        for course in items or []
    ]


def _interests(items) -> List[InterestEntry]:
    return [
        InterestEntry(name=interest.name, icon=interest.icon or "")
        for interest in items or []
        if interest.name
    ]


# ============================================================================
# Entry points
# ============================================================================

def normalize_resume(resume, owner=None, profile_picture: Optional[str] = None) -> CanonicalRenderModel:
    """
    Build the render model for one resume.

    Args:
        resume: Resume with its collections already loaded
        owner: The owning User (or anything with the OwnerProfile attributes)
        profile_picture: Picture URL already resolved by services.profile_picture
    """
    owner_profile = OwnerProfile.model_validate(owner) if owner is not None else None
    personal_info = merge_personal_info(parse_personal_info(resume.content), owner_profile)

    return CanonicalRenderModel(
        title=resume.title or "",
        job_title=resume.job_title or "",
        profile_picture=profile_picture or None,
        personal_info=personal_info,
        strengths=_strengths(resume.strengths),
        work_experience=_work_experience(resume.work_experience),
        education=_education(resume.education),
        courses=_courses(resume.courses),
        interests=_interests(resume.interests),
    )


def select_template_key(requested: Optional[str], stored: Optional[str], fallback: str = FALLBACK_TEMPLATE) -> str:
    """Query parameter, then the template saved on the resume, then the fallback."""
    for candidate in (requested, stored):
        if candidate and candidate.strip():
            return candidate.strip()
    return fallback
