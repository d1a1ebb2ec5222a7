from pydantic import BaseModel, EmailStr, Field
from datetime import datetime


class UserResponse(BaseModel):
    """User without the password hash"""
    id: int
    name: str
    email: str
    is_active: bool
    created_at: datetime

    class Config:
        from_attributes = True


class UserLogin(BaseModel):
    """Login payload"""
    email: EmailStr
    password: str = Field(..., min_length=1)


class Token(BaseModel):
    """Login response"""
    access_token: str
    token_type: str = "bearer"
    user: UserResponse
