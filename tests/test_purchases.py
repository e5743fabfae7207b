from conftest import API, signup_and_signin

from models.admin import Admin
from models.course import Course
from models.log import AuditLog
from models.purchase import Purchase
from utils.tokenJWT import USER, create_access_token


def seed_course(db, course_id="c1", title="Course One"):
    admin = Admin(email=f"owner-{course_id}@school.io", password_hash="x", first_name="O", last_name="W")
    db.add(admin)
    db.commit()
    course = Course(id=course_id, title=title, description="d", price=10, image_url="u", creator_id=admin.id)
    db.add(course)
    db.commit()
    return course


def purchases(client, token):
    resp = client.get(f"{API}/user/purchases", headers={"Authorization": token})
    assert resp.status_code == 200
    return resp.json()


def test_preview_is_public_and_unscoped(client, db):
    seed_course(db, "c1", "One")
    seed_course(db, "c2", "Two")

    resp = client.get(f"{API}/course/preview")
    assert resp.status_code == 200
    body = resp.json()
    assert body["message"] == "course preview endpoint"
    assert sorted(c["id"] for c in body["courses"]) == ["c1", "c2"]


def test_end_to_end_purchase(client, db):
    seed_course(db, "c1")
    resp = client.post(f"{API}/user/signup", json={
        "email": "u1@x.com", "password": "secret1", "firstName": "Una", "lastName": "One",
    })
    assert resp.status_code == 200
    token = client.post(f"{API}/user/signin", json={"email": "u1@x.com", "password": "secret1"}).json()["token"]

    resp = client.post(f"{API}/course/purchase", headers={"Authorization": token}, json={"courseId": "c1"})
    assert resp.status_code == 200
    assert resp.json() == {"message": "course purchased successfully"}

    body = purchases(client, token)
    assert body["message"] == "user purchased courses endpoint"
    assert len(body["purchases"]) == 1
    purchase = body["purchases"][0]
    assert purchase["courseId"] == "c1"
    assert purchase["userId"]
    assert [c["id"] for c in body["courseData"]] == ["c1"]
    assert body["courseData"][0]["title"] == "Course One"


def test_duplicate_purchases_are_kept(client, db, user_token):
    seed_course(db, "c1")
    headers = {"Authorization": user_token}
    for _ in range(2):
        assert client.post(f"{API}/course/purchase", headers=headers, json={"courseId": "c1"}).status_code == 200

    body = purchases(client, user_token)
    assert len(body["purchases"]) == 2
    assert {p["courseId"] for p in body["purchases"]} == {"c1"}
    assert len({p["id"] for p in body["purchases"]}) == 2
    # Joined once per distinct course
    assert [c["id"] for c in body["courseData"]] == ["c1"]


def test_purchases_never_leak_between_users(client, db, user_token):
    seed_course(db, "c1")
    seed_course(db, "c2")
    other_token = signup_and_signin(client, "user", "other@school.io")

    client.post(f"{API}/course/purchase", headers={"Authorization": user_token}, json={"courseId": "c1"})
    client.post(f"{API}/course/purchase", headers={"Authorization": other_token}, json={"courseId": "c2"})

    mine = purchases(client, user_token)
    theirs = purchases(client, other_token)
    assert [p["courseId"] for p in mine["purchases"]] == ["c1"]
    assert [p["courseId"] for p in theirs["purchases"]] == ["c2"]
    assert mine["purchases"][0]["userId"] != theirs["purchases"][0]["userId"]


def test_user_id_in_body_is_ignored(client, db, user_token):
    seed_course(db, "c1")
    other_token = signup_and_signin(client, "user", "other@school.io")

    client.post(f"{API}/course/purchase", headers={"Authorization": user_token},
                json={"courseId": "c1", "userId": "someone-else"})

    assert len(purchases(client, user_token)["purchases"]) == 1
    assert purchases(client, other_token)["purchases"] == []


def test_purchase_of_unknown_course_is_recorded(client, user_token):
    resp = client.post(f"{API}/course/purchase", headers={"Authorization": user_token}, json={"courseId": "nope"})
    assert resp.status_code == 200

    body = purchases(client, user_token)
    assert [p["courseId"] for p in body["purchases"]] == ["nope"]
    assert body["courseData"] == []


def test_purchase_requires_course_id(client, user_token):
    resp = client.post(f"{API}/course/purchase", headers={"Authorization": user_token}, json={})
    assert resp.status_code == 400
    assert resp.json()["message"] == "Invalid data"


def test_purchase_is_audited(client, db, user_token):
    client.post(f"{API}/course/purchase", headers={"Authorization": user_token}, json={"courseId": "c9"})

    log = db.query(AuditLog).filter(AuditLog.action == "PURCHASE").one()
    assert log.role == "user"
    assert log.meta["course_id"] == "c9"


def test_purchase_with_token_for_missing_account_is_recorded(client, db):
    token = create_access_token("no-such-user", USER)
    resp = client.post(f"{API}/course/purchase", headers={"Authorization": token}, json={"courseId": "c1"})
    assert resp.status_code == 200

    assert [p.user_id for p in db.query(Purchase)] == ["no-such-user"]
