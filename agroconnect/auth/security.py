from passlib.context import CryptContext
from datetime import datetime, timedelta
from jose import JWTError, jwt
from typing import Optional
from fastapi.security import OAuth2PasswordBearer
from fastapi import Depends
from sqlalchemy.orm import Session
from agroconnect.core.config import settings
from agroconnect.core.errors import AuthenticationError, AuthorizationError
from agroconnect.db.session import get_db
from agroconnect.models.user import User as UserModel
from agroconnect.schemas.user import TokenData

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")
# auto_error is off so a missing header goes through our own error envelope
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/token", auto_error=False)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = data.copy()
    if expires_delta:
        expire = datetime.utcnow() + expires_delta
    else:
        expire = datetime.utcnow() + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode.update({"exp": expire})
    encoded_jwt = jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    return encoded_jwt


def create_user_token(user: UserModel) -> str:
    return create_access_token(data={"sub": str(user.id)})


def decode_access_token(token: str) -> TokenData:
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
        subject = payload.get("sub")
        if subject is None:
            raise AuthenticationError()
        return TokenData(user_id=int(subject))
    except (JWTError, ValueError) as exc:
        raise AuthenticationError(error=str(exc)) from exc


async def get_current_user(token: Optional[str] = Depends(oauth2_scheme), db: Session = Depends(get_db)):
    if not token:
        raise AuthenticationError("No authentication token, access denied")

    token_data = decode_access_token(token)
    user = db.get(UserModel, token_data.user_id)
    if user is None:
        raise AuthenticationError("User not found for this token")
    return user


async def get_current_active_user(current_user: UserModel = Depends(get_current_user)):
    if not current_user.is_active:
        raise AuthorizationError("Inactive user")
    return current_user


def ensure_farmer(user: UserModel, action: str = "create listings") -> None:
    if user.role != "farmer":
        raise AuthorizationError(f"Only farmers can {action}")


def is_farmer(user: UserModel = Depends(get_current_active_user)):
    ensure_farmer(user)
    return user
