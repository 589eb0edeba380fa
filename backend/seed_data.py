"""
Seed script to populate the database with a demo user and resume
Run with: python -m seed_data
"""
import asyncio
from datetime import date
from sqlalchemy import select
from resume_builder.database import async_session_maker, init_db
from resume_builder.models import User, Resume, Strength, WorkExperience, Education, Course, Interest
from resume_builder.services.auth import get_password_hash


async def seed_database():
    await init_db()

    async with async_session_maker() as db:
        result = await db.execute(select(User).where(User.username == "demo"))
        if result.scalar_one_or_none():
            print("Demo user already exists, skipping seed")
            return

        user = User(
            username="demo",
            email="demo@example.com",
            hashed_password=get_password_hash("password123"),
            name="Alex Morgan",
            location="Austin",
            phone="+1 512 555 0199",
            linkedin_url="https://www.linkedin.com/in/alex-morgan",
            portfolio_url="https://alexmorgan.dev",
        )
        db.add(user)
        await db.flush()

        resume = Resume(
            user_id=user.id,
            title="Backend Engineer",
            job_title="Senior Backend Engineer",
            template="modern",
            content={
                "personalInfo": {
                    "state": "TX",
                    "summary": "Backend engineer with eight years of experience building APIs and data pipelines.",
                    "github": "https://github.com/alexmorgan",
                }
            },
            strengths=[
                Strength(skill_name="Python", rating=9),
                Strength(skill_name="PostgreSQL", rating=8),
                Strength(skill_name="Kubernetes", rating=6),
            ],
            work_experience=[
                WorkExperience(
                    company="Northwind Logistics",
                    position="Senior Backend Engineer",
                    city="Austin",
                    state="TX",
                    start_date=date(2021, 3, 1),
                    current=True,
                    bullet_points=[
                        {"description": "Led the migration of order processing to async workers"},
                        {"description": "Cut p95 API latency from 800ms to 120ms"},
                    ],
                ),
                WorkExperience(
                    company="Contoso Retail",
                    position="Software Engineer",
                    start_date=date(2017, 6, 1),
                    end_date=date(2021, 2, 28),
                    bullet_points=[{"description": "Built the inventory sync service"}],
                ),
            ],
            education=[
                Education(
                    institution="University of Texas",
                    degree="B.S.",
                    field="Computer Science",
                    start_date=date(2013, 8, 15),
                    end_date=date(2017, 5, 20),
                    gpa=3.7,
                ),
            ],
            courses=[
                Course(title="Designing Data-Intensive Applications", provider="O'Reilly"),
            ],
            interests=[
                Interest(name="Rock climbing"),
                Interest(name="Chess"),
            ],
        )
        db.add(resume)
        await db.commit()

        print("Database seeded successfully!")
        print("Login: demo / password123")


if __name__ == "__main__":
    asyncio.run(seed_database())
