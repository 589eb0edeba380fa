from .user import User
from .resume import Resume, Strength, WorkExperience, Education, Course, Interest

__all__ = [
    "User",
    # Resume models
    "Resume", "Strength", "WorkExperience", "Education", "Course", "Interest",
]
