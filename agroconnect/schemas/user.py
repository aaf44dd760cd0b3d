from typing import Literal, Optional
from pydantic import BaseModel, EmailStr, Field
from agroconnect.schemas.base import BaseSchema, InputSchema, TimestampSchema

Role = Literal["farmer", "buyer"]


class UserCreate(InputSchema):
    email: EmailStr
    password: str = Field(min_length=6, max_length=72)
    full_name: str = Field(min_length=1, max_length=100)
    role: Role


class UserLogin(InputSchema):
    email: EmailStr
    password: str = Field(min_length=1)


class User(TimestampSchema):
    id: int
    email: EmailStr
    full_name: str
    role: Role


class UserSummary(BaseSchema):
    id: int
    name: str
    email: EmailStr


class AuthResponse(BaseSchema):
    success: bool = True
    token: str
    user: User


class UserResponse(BaseSchema):
    success: bool = True
    user: User


class Token(BaseModel):
    access_token: str
    token_type: str


class TokenData(BaseModel):
    user_id: Optional[int] = None
