import os
import sys

# Add 'backend' folder to Python path
sys.path.append(os.path.abspath(os.path.dirname(__file__)))

from dotenv import load_dotenv

load_dotenv()

from database import SessionLocal, init_db
from models.admin import Admin
from models.course import Course
from utils.hashing import get_password_hash

# Configuration
DEMO_ADMIN_EMAIL = os.getenv("DEMO_ADMIN_EMAIL", "instructor@example.com")
DEMO_ADMIN_PASSWORD = os.getenv("DEMO_ADMIN_PASSWORD", "instructor123")

DEMO_COURSES = [
    {
        "title": "Python for the Web",
        "description": "Python basics, FastAPI, databases and deployment.",
        "price": 29.0,
        "image_url": "https://www.youtube.com/watch?v=rfscVS0vtbw",
    },
    {
        "title": "Frontend Basics",
        "description": "HTML, CSS and JavaScript from scratch.",
        "price": 49.0,
        "image_url": "https://www.youtube.com/watch?v=mU6anWqZJcc",
    },
    {
        "title": "Fullstack Pro",
        "description": "From the database to production.",
        "price": 99.0,
        "image_url": "https://www.youtube.com/watch?v=nu_pCVPKzTk",
    },
]
# End Configuration


def seed(session) -> int:
    """Create the demo instructor and catalog; returns the number of courses added."""
    admin = session.query(Admin).filter(Admin.email == DEMO_ADMIN_EMAIL).first()
    if not admin:
        admin = Admin(
            email=DEMO_ADMIN_EMAIL,
            password_hash=get_password_hash(DEMO_ADMIN_PASSWORD),
            first_name="Demo",
            last_name="Instructor",
        )
        session.add(admin)
        session.commit()
        session.refresh(admin)
        print(f"Created demo admin {admin.email}")

    if session.query(Course).count() > 0:
        print("Catalog already has courses, nothing to seed.")
        return 0

    session.add_all(Course(creator_id=admin.id, **data) for data in DEMO_COURSES)
    session.commit()
    print(f"Seeded {len(DEMO_COURSES)} courses for {admin.email}")
    return len(DEMO_COURSES)


if __name__ == "__main__":
    init_db()
    session = SessionLocal()
    try:
        seed(session)
    finally:
        session.close()
