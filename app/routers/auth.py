"""Owner signup, login and current user."""
import logging
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from app.database import get_db
from app.dependencies import get_current_user
from app.models.user import User, UserRole
from app.schemas.auth import Token, UserCreate, UserLogin, UserResponse
from app.services.auth import authenticate, create_access_token, get_password_hash, is_government_email

router = APIRouter(prefix="/auth", tags=["auth"])
log = logging.getLogger("uvicorn.error")


@router.post("/signup", response_model=UserResponse, status_code=201)
def signup(data: UserCreate, db: Session = Depends(get_db)):
    """New signups are always owners."""
    email = data.email.strip().lower()
    if is_government_email(email):
        raise HTTPException(status_code=400, detail="Cannot register with government email domain")
    if db.query(User).filter(User.email == email).first():
        raise HTTPException(status_code=400, detail="Email already registered")
    user = User(
        email=email,
        name=data.name.strip(),
        hashed_password=get_password_hash(data.password),
        role=UserRole.owner,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    log.info("Owner account created: %s", email)
    return UserResponse.model_validate(user)


@router.post("/login", response_model=Token)
def login(data: UserLogin, db: Session = Depends(get_db)):
    user = authenticate(db, data.email, data.password)
    if not user:
        raise HTTPException(status_code=401, detail="Invalid email or password")
    return Token(access_token=create_access_token(user), user=UserResponse.model_validate(user))


@router.get("/me", response_model=UserResponse)
def me(current_user: User = Depends(get_current_user)):
    return UserResponse.model_validate(current_user)
