"""
Resume models - a resume and the collections rendered into it
"""
from sqlalchemy import (
    Column, Integer, String, Text, DateTime, Date, Boolean, Float,
    ForeignKey, JSON
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..database import Base


class Resume(Base):
    """A user's resume; personal info overrides live in the content blob"""
    __tablename__ = "resumes"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)

    title = Column(String(255), nullable=False)
    job_title = Column(String(255), nullable=True)
    template = Column(String(50), nullable=True)

    # data: URI, absolute URL, legacy /uploads path or a client-side "profile_" id
    profile_picture = Column(Text, nullable=True)

    # {"personalInfo": {"name": ..., "email": ..., ...}}
    content = Column(JSON, default=dict)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    user = relationship("User", back_populates="resumes")
    strengths = relationship("Strength", back_populates="resume", cascade="all, delete-orphan", order_by="Strength.id")
    work_experience = relationship("WorkExperience", back_populates="resume", cascade="all, delete-orphan", order_by="WorkExperience.id")
    education = relationship("Education", back_populates="resume", cascade="all, delete-orphan", order_by="Education.id")
    courses = relationship("Course", back_populates="resume", cascade="all, delete-orphan", order_by="Course.id")
    interests = relationship("Interest", back_populates="resume", cascade="all, delete-orphan", order_by="Interest.id")


class Strength(Base):
    """Skill with a 0-10 rating"""
    __tablename__ = "strengths"

    id = Column(Integer, primary_key=True, index=True)
    resume_id = Column(Integer, ForeignKey('resumes.id', ondelete='CASCADE'), nullable=False)

    skill_name = Column(String(100), nullable=False)
    rating = Column(Integer, default=0)

    resume = relationship("Resume", back_populates="strengths")


class WorkExperience(Base):
    __tablename__ = "work_experience"

    id = Column(Integer, primary_key=True, index=True)
    resume_id = Column(Integer, ForeignKey('resumes.id', ondelete='CASCADE'), nullable=False)

    company = Column(String(300), nullable=False)
    position = Column(String(200), nullable=False)
    city = Column(String(100), nullable=True)
    state = Column(String(100), nullable=True)
    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)  # null while current
    current = Column(Boolean, default=False)
    bullet_points = Column(JSON, default=list)  # [{"description": "..."}]

    resume = relationship("Resume", back_populates="work_experience")


class Education(Base):
    __tablename__ = "education"

    id = Column(Integer, primary_key=True, index=True)
    resume_id = Column(Integer, ForeignKey('resumes.id', ondelete='CASCADE'), nullable=False)

    institution = Column(String(300), nullable=False)
    degree = Column(String(200), nullable=True)
    field = Column(String(200), nullable=True)
    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)
    current = Column(Boolean, default=False)
    gpa = Column(Float, nullable=True)

    resume = relationship("Resume", back_populates="education")


class Course(Base):
    __tablename__ = "courses"

    id = Column(Integer, primary_key=True, index=True)
    resume_id = Column(Integer, ForeignKey('resumes.id', ondelete='CASCADE'), nullable=False)

    title = Column(String(300), nullable=False)
    provider = Column(String(200), nullable=True)
    link = Column(String(500), nullable=True)

    resume = relationship("Resume", back_populates="courses")


class Interest(Base):
    __tablename__ = "interests"

    id = Column(Integer, primary_key=True, index=True)
    resume_id = Column(Integer, ForeignKey('resumes.id', ondelete='CASCADE'), nullable=False)

    name = Column(String(100), nullable=False)
    icon = Column(String(50), nullable=True)

    resume = relationship("Resume", back_populates="interests")
