"""
JobPortal Database Seeder

Creates one recruiter and one job seeker so the front end can be tried
without going through registration (which needs a Cloudinary account).
"""

import sys
sys.path.insert(0, ".")

from app.db.session import SessionLocal, engine
from app.db.base import Base
from app.models.user import User, UserRole
from app.core.security import get_password_hash

PLACEHOLDER_PHOTO = "https://res.cloudinary.com/demo/image/upload/sample.jpg"


def seed_database():
    """Seed the database with test data."""

    # Create all tables
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()

    try:
        # Check if already seeded
        existing_recruiter = db.query(User).filter(User.email == "recruiter@jobportal.dev").first()
        if existing_recruiter:
            print("Database already seeded. Skipping...")
            return

        print("Seeding database...")

        recruiter = User(
            fullname="Sarah Chen",
            email="recruiter@jobportal.dev",
            phone_number="5550100001",
            hashed_password=get_password_hash("recruiter123"),
            role=UserRole.RECRUITER,
            profile={"skills": [], "profile_photo_url": PLACEHOLDER_PHOTO},
        )
        db.add(recruiter)

        seeker = User(
            fullname="John Doe",
            email="john.doe@example.com",
            phone_number="5550100002",
            hashed_password=get_password_hash("seeker123"),
            role=UserRole.SEEKER,
            profile={
                "bio": "Backend developer, 4 years of Python.",
                "skills": ["Python", "FastAPI", "Docker"],
                "profile_photo_url": PLACEHOLDER_PHOTO,
            },
        )
        db.add(seeker)

        db.commit()

        print("✅ Database seeded successfully!")
        print("\n📋 Created Users:")
        print("   - recruiter@jobportal.dev (password: recruiter123) [recruiter]")
        print("   - john.doe@example.com (password: seeker123) [seeker]")

    except Exception as e:
        db.rollback()
        print(f"❌ Error seeding database: {e}")
        raise

    finally:
        db.close()


if __name__ == "__main__":
    seed_database()
