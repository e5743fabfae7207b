# backend/routes/user.py
from fastapi import APIRouter, Depends, HTTPException, status, Request
from sqlalchemy.orm import Session
from database import get_db
from services import accounts, courses as course_service
from utils.audit import write_log, client_ip
from utils.errors import AccountNotFound, DuplicateIdentity, InvalidCredentials
from utils.tokenJWT import USER, create_access_token, current_user_id
from schemas.user import SignupRequest, SigninRequest, SigninResponse, MessageResponse, ValidateResponse
from schemas.course import PurchasesResponse

router = APIRouter(prefix="/user", tags=["User"])


# Register a new student account
@router.post("/signup", response_model=MessageResponse)
def signup(payload: SignupRequest, request: Request, db: Session = Depends(get_db)):
    try:
        user = accounts.register(
            db, USER,
            email=payload.email, password=payload.password,
            first_name=payload.first_name, last_name=payload.last_name,
        )
    except DuplicateIdentity:
        write_log(db, principal_id=None, role=USER.name, action="SIGNUP", resource="auth",
                  status="FAIL", ip=client_ip(request), meta={"email": payload.email, "reason": "Email exists"})
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="User already exists")

    write_log(db, principal_id=user.id, role=USER.name, action="SIGNUP", resource="auth",
              ip=client_ip(request), meta={"email": user.email})
    return {"message": "signup succeded"}


# Authenticate user and issue a token signed with the user secret
@router.post("/signin", response_model=SigninResponse)
def signin(payload: SigninRequest, request: Request, db: Session = Depends(get_db)):
    try:
        user = accounts.authenticate(db, USER, payload.email, payload.password)
    except (AccountNotFound, InvalidCredentials) as e:
        # Users are told when the account does not exist
        detail = "User not found" if isinstance(e, AccountNotFound) else "Incorrect credentials"
        write_log(db, principal_id=None, role=USER.name, action="SIGNIN", resource="auth",
                  status="FAIL", ip=client_ip(request), meta={"email": payload.email, "reason": detail})
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=detail)

    token = create_access_token(user.id, USER)
    write_log(db, principal_id=user.id, role=USER.name, action="SIGNIN", resource="auth",
              ip=client_ip(request), meta={"email": user.email})
    return SigninResponse(token=token, first_name=user.first_name, last_name=user.last_name)


@router.get("/validate", response_model=ValidateResponse)
def validate(user_id: str = Depends(current_user_id)):
    return {"valid": True}


# The caller's purchases joined with the courses they reference
@router.get("/purchases", response_model=PurchasesResponse)
def purchases(db: Session = Depends(get_db), user_id: str = Depends(current_user_id)):
    purchase_rows, course_rows = course_service.list_purchases_for_user(db, user_id)
    return {
        "message": "user purchased courses endpoint",
        "purchases": purchase_rows,
        "course_data": course_rows,
    }
