from pydantic import BaseModel

from .user import UserRead


class RegisterRequest(BaseModel):
    user_name: str = ""
    password: str = ""


class LoginRequest(BaseModel):
    user_name: str = ""
    password: str = ""


class AuthResponse(BaseModel):
    token: str
    user: UserRead


class MessageResponse(BaseModel):
    message: str
