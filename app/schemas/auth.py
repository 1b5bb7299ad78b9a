from pydantic import BaseModel, EmailStr
from typing import Optional
from datetime import datetime

class UserLogin(BaseModel):
    email: EmailStr
    password: str

class UserRegister(BaseModel):
    email: EmailStr
    password: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_name: Optional[str] = None

class AuthResponse(BaseModel):
    access_token: str
    token_type: str

class ProfileRead(BaseModel):
    id: int
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_name: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
