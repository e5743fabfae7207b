# backend/routes/admin.py
from fastapi import APIRouter, Depends, HTTPException, status, Request
from sqlalchemy.orm import Session
from database import get_db
from services import accounts, courses as course_service
from utils.audit import write_log, client_ip
from utils.errors import AccountNotFound, DuplicateIdentity, InvalidCredentials
from utils.tokenJWT import ADMIN, create_access_token, current_admin_id
from schemas.user import SignupRequest, SigninRequest, SigninResponse, MessageResponse, ValidateResponse
from schemas.course import CourseCreate, CourseUpdate, CourseAck, CourseListResponse

router = APIRouter(prefix="/admin", tags=["Admin"])


# Register a new admin (instructor) account
@router.post("/signup", response_model=MessageResponse)
def signup(payload: SignupRequest, request: Request, db: Session = Depends(get_db)):
    try:
        admin = accounts.register(
            db, ADMIN,
            email=payload.email, password=payload.password,
            first_name=payload.first_name, last_name=payload.last_name,
        )
    except DuplicateIdentity:
        write_log(db, principal_id=None, role=ADMIN.name, action="SIGNUP", resource="auth",
                  status="FAIL", ip=client_ip(request), meta={"email": payload.email, "reason": "Email exists"})
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Admin already exists")

    write_log(db, principal_id=admin.id, role=ADMIN.name, action="SIGNUP", resource="auth",
              ip=client_ip(request), meta={"email": admin.email})
    return {"message": "signup succeded"}


# Authenticate admin and issue a token signed with the admin secret
@router.post("/signin", response_model=SigninResponse)
def signin(payload: SigninRequest, request: Request, db: Session = Depends(get_db)):
    try:
        admin = accounts.authenticate(db, ADMIN, payload.email, payload.password)
    except (AccountNotFound, InvalidCredentials):
        # Unknown email and wrong password are not distinguished for admins
        write_log(db, principal_id=None, role=ADMIN.name, action="SIGNIN", resource="auth",
                  status="FAIL", ip=client_ip(request), meta={"email": payload.email})
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Incorrect credentials")

    token = create_access_token(admin.id, ADMIN)
    write_log(db, principal_id=admin.id, role=ADMIN.name, action="SIGNIN", resource="auth",
              ip=client_ip(request), meta={"email": admin.email})
    return SigninResponse(token=token, first_name=admin.first_name, last_name=admin.last_name)


@router.get("/validate", response_model=ValidateResponse)
def validate(admin_id: str = Depends(current_admin_id)):
    return {"valid": True}


# Create a course owned by the calling admin
@router.post("/course", response_model=CourseAck)
def create_course(
    payload: CourseCreate,
    request: Request,
    db: Session = Depends(get_db),
    admin_id: str = Depends(current_admin_id),
):
    course = course_service.create_course(
        db, admin_id,
        title=payload.title, description=payload.description,
        price=payload.price, image_url=payload.image_url,
    )
    write_log(db, principal_id=admin_id, role=ADMIN.name, action="COURSE_CREATE", resource="course",
              ip=client_ip(request), meta={"course_id": course.id, "title": course.title})
    return CourseAck(message="course created successfully", course_id=course.id)


# Update a course; only matches courses the caller created
@router.put("/course", response_model=CourseAck)
def update_course(
    payload: CourseUpdate,
    request: Request,
    db: Session = Depends(get_db),
    admin_id: str = Depends(current_admin_id),
):
    # null and omitted fields both leave the column unchanged
    fields = payload.model_dump(exclude_none=True, exclude={"course_id"})
    course = course_service.update_course(db, admin_id, payload.course_id, fields)
    if course is None:
        write_log(db, principal_id=admin_id, role=ADMIN.name, action="COURSE_UPDATE", resource="course",
                  status="FAIL", ip=client_ip(request), meta={"course_id": payload.course_id})
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Course not found")

    write_log(db, principal_id=admin_id, role=ADMIN.name, action="COURSE_UPDATE", resource="course",
              ip=client_ip(request), meta={"course_id": course.id, "fields": sorted(fields)})
    return CourseAck(message="course updated successfully", course_id=course.id)


# List the caller's own courses
@router.get("/course/bulk", response_model=CourseListResponse)
def list_courses(db: Session = Depends(get_db), admin_id: str = Depends(current_admin_id)):
    courses = course_service.list_courses_by_creator(db, admin_id)
    return {"message": "courses list", "courses": courses}


# Delete a course the caller created
@router.delete("/course/{course_id}", response_model=CourseAck)
def delete_course(
    course_id: str,
    request: Request,
    db: Session = Depends(get_db),
    admin_id: str = Depends(current_admin_id),
):
    if not course_service.delete_course(db, admin_id, course_id):
        write_log(db, principal_id=admin_id, role=ADMIN.name, action="COURSE_DELETE", resource="course",
                  status="FAIL", ip=client_ip(request), meta={"course_id": course_id})
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Course not found")

    write_log(db, principal_id=admin_id, role=ADMIN.name, action="COURSE_DELETE", resource="course",
              ip=client_ip(request), meta={"course_id": course_id})
    return CourseAck(message="course deleted successfully", course_id=course_id)
