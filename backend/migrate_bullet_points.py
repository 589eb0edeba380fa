"""
Migration: normalize work experience bullet points.

Older rows store bullet points as a plain string or a list of strings.
This rewrites them as [{"description": "..."}].
Run with: python migrate_bullet_points.py
"""
import asyncio
from dotenv import load_dotenv
from sqlalchemy import select

load_dotenv()

from resume_builder.database import async_session_maker
from resume_builder.models import WorkExperience


def convert_bullet_points(raw):
    """Return the normalized list, or None when the row is already fine."""
    if raw is None:
        return []
    if isinstance(raw, str):
        return [{"description": raw.strip()}] if raw.strip() else []
    if not isinstance(raw, list):
        return []

    converted = []
    changed = False
    for item in raw:
        if isinstance(item, dict) and isinstance(item.get("description"), str):
            converted.append({"description": item["description"]})
        elif isinstance(item, str):
            changed = True
            if item.strip():
                converted.append({"description": item.strip()})
        else:
            changed = True
    return converted if changed else None


async def migrate():
    migrated = 0

    async with async_session_maker() as db:
        result = await db.execute(select(WorkExperience))
        for work in result.scalars().all():
            converted = convert_bullet_points(work.bullet_points)
            if converted is None or converted == work.bullet_points:
                continue
            work.bullet_points = converted
            migrated += 1

        await db.commit()

    print(f"✅ Migrated bullet points on {migrated} work experience entries")


if __name__ == "__main__":
    print("Running migration: normalize bullet points...")
    asyncio.run(migrate())
    print("Migration complete!")
