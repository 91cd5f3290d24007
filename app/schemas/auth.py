"""Signup, login and token schemas."""
from pydantic import BaseModel, EmailStr, model_validator
from app.models.user import UserRole

PASSWORD_MIN_LENGTH = 6


class UserCreate(BaseModel):
    """Owner self-signup. Admin accounts are seeded, never signed up."""
    name: str
    email: EmailStr
    password: str
    confirm_password: str

    @model_validator(mode="after")
    def passwords_valid(self):
        if not self.name.strip():
            raise ValueError("All fields are required")
        if self.confirm_password != self.password:
            raise ValueError("Passwords do not match")
        if len(self.password) < PASSWORD_MIN_LENGTH:
            raise ValueError(f"Password must be at least {PASSWORD_MIN_LENGTH} characters")
        return self


class UserLogin(BaseModel):
    email: EmailStr
    password: str


class UserResponse(BaseModel):
    id: int
    email: str
    name: str
    role: UserRole

    class Config:
        from_attributes = True


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserResponse
