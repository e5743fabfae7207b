# backend/services/courses.py
# Course and purchase queries, scoped by the authenticated principal
from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from models.course import Course
from models.purchase import Purchase

# Columns an owner may change through update_course
UPDATABLE_FIELDS = ("title", "description", "image_url", "price")


def create_course(db: Session, admin_id: str, *, title: str, description: str,
                  price: float, image_url: Optional[str]) -> Course:
    course = Course(
        title=title,
        description=description,
        price=price,
        image_url=image_url,
        creator_id=admin_id,
    )
    db.add(course)
    db.commit()
    db.refresh(course)
    return course


def _owned_course(db: Session, admin_id: str, course_id: str) -> Optional[Course]:
    return db.query(Course).filter(Course.id == course_id, Course.creator_id == admin_id).first()


def update_course(db: Session, admin_id: str, course_id: str, fields: dict) -> Optional[Course]:
    """Apply ``fields`` to the course if ``admin_id`` owns it.

    Returns None when nothing matched, whether the course is missing or owned
    by another admin.
    """
    course = _owned_course(db, admin_id, course_id)
    if course is None:
        return None

    for name, value in fields.items():
        if name in UPDATABLE_FIELDS and value is not None:
            setattr(course, name, value)
    db.commit()
    db.refresh(course)
    return course


def list_courses_by_creator(db: Session, admin_id: str) -> List[Course]:
    return db.query(Course).filter(Course.creator_id == admin_id).all()


def delete_course(db: Session, admin_id: str, course_id: str) -> bool:
    # Same ownership filter as update_course
    course = _owned_course(db, admin_id, course_id)
    if course is None:
        return False
    db.delete(course)
    db.commit()
    return True


def list_public_courses(db: Session) -> List[Course]:
    return db.query(Course).all()


def purchase_course(db: Session, user_id: str, course_id: str) -> Purchase:
    # No existence, duplicate or payment check
    purchase = Purchase(user_id=user_id, course_id=course_id)
    db.add(purchase)
    db.commit()
    db.refresh(purchase)
    return purchase


def list_purchases_for_user(db: Session, user_id: str) -> Tuple[List[Purchase], List[Course]]:
    purchases = (
        db.query(Purchase)
        .filter(Purchase.user_id == user_id)
        .order_by(Purchase.created_at, Purchase.id)
        .all()
    )
    course_ids = {p.course_id for p in purchases}
    courses = db.query(Course).filter(Course.id.in_(course_ids)).all() if course_ids else []
    return purchases, courses
