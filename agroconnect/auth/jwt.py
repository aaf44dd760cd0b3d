import logging

from fastapi import APIRouter, Depends, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from agroconnect.core.errors import AuthenticationError, ValidationError
from agroconnect.db.session import get_db, commit
from agroconnect.models.user import User
from agroconnect.schemas.user import (
    AuthResponse,
    Token,
    User as UserSchema,
    UserCreate,
    UserLogin,
    UserResponse,
)
from agroconnect.auth.security import (
    get_password_hash,
    verify_password,
    create_user_token,
    get_current_active_user,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


def authenticate_user(db: Session, email: str, password: str) -> User:
    user = db.query(User).filter(User.email == email.lower()).first()
    if not user or not verify_password(password, user.hashed_password):
        raise AuthenticationError("Invalid credentials")
    return user


# REGISTER: create user + return user + token
@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register_user(user_data: UserCreate, db: Session = Depends(get_db)):
    email = user_data.email.lower()
    existing_user = db.query(User).filter(User.email == email).first()
    if existing_user:
        raise ValidationError("User already exists with this email")

    db_user = User(
        email=email,
        hashed_password=get_password_hash(user_data.password),
        full_name=user_data.full_name,
        role=user_data.role,
    )
    db.add(db_user)
    commit(db, db_user)
    logger.info("User registered", extra={"user_id": db_user.id})

    return AuthResponse(token=create_user_token(db_user), user=UserSchema.model_validate(db_user))


# LOGIN: returns user + token (frontend-friendly)
@router.post("/login", response_model=AuthResponse)
def login_with_user(credentials: UserLogin, db: Session = Depends(get_db)):
    user = authenticate_user(db, credentials.email, credentials.password)
    return AuthResponse(token=create_user_token(user), user=UserSchema.model_validate(user))


# TOKEN-ONLY: OAuth2 compatibility (for Swagger/OAuth2PasswordBearer); username is the email
@router.post("/token", response_model=Token)
def login_token_only(form_data: OAuth2PasswordRequestForm = Depends(), db: Session = Depends(get_db)):
    user = authenticate_user(db, form_data.username, form_data.password)
    return {"access_token": create_user_token(user), "token_type": "bearer"}


@router.get("/me", response_model=UserResponse)
def read_user_me(current_user: User = Depends(get_current_active_user)):
    return UserResponse(user=UserSchema.model_validate(current_user))
