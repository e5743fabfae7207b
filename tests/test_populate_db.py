from models.admin import Admin
from models.course import Course
from populate_db import DEMO_COURSES, seed


def test_seed_creates_admin_and_catalog_once(db):
    assert seed(db) == len(DEMO_COURSES)
    assert db.query(Admin).count() == 1
    assert db.query(Course).count() == len(DEMO_COURSES)

    assert seed(db) == 0
    assert db.query(Admin).count() == 1
    assert db.query(Course).count() == len(DEMO_COURSES)


def test_seeded_courses_belong_to_demo_admin(db):
    seed(db)
    admin = db.query(Admin).one()
    assert {c.creator_id for c in db.query(Course)} == {admin.id}
