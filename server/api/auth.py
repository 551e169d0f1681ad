# server/api/auth.py

import logging
from datetime import datetime, timedelta, timezone
from jose import jwt
from pydantic import BaseModel
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from core.config import Config
from core.errors import AuthenticationError, NotFoundError, ValidationError
from database import get_db
from models.user import User as UserModel


ALGORITHM = "HS256"


router = APIRouter()
logger = logging.getLogger(__name__)


class RegisterRequest(BaseModel):
    username: str | None = None
    email: str | None = None
    password: str | None = None


class LoginRequest(BaseModel):
    email: str | None = None
    password: str | None = None


def authenticate_user(db: Session, email: str | None, password: str | None) -> UserModel:
    if not email or not password:
        raise ValidationError("Email and password are required")
    user = db.query(UserModel).filter(UserModel.email == email).first()
    if not user:
        raise NotFoundError("User not found")
    if user.password != password:
        raise AuthenticationError("Incorrect email or password")
    return user


def create_access_token(data: dict, expires_delta: timedelta | None = None) -> str:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=15))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, Config.JWT_SECRET_KEY, algorithm=ALGORITHM)


@router.post("/register_user")
def register(req: RegisterRequest, db: Session = Depends(get_db)):
    if not req.email or not req.password:
        raise ValidationError("Email and password are required")
    user = UserModel(username=req.username, email=req.email, password=req.password)
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("User %s registered", user.id)
    return {"message": "User Added Successfully...", "user": user.to_dict()}


@router.post("/login")
def login(req: LoginRequest, db: Session = Depends(get_db)):
    """
    Checks the credentials and returns a signed access token.
    The token is advisory: no endpoint verifies it, since there is no
    authorization model.
    """
    user = authenticate_user(db, req.email, req.password)
    access_token = create_access_token(
        data={"sub": user.id},
        expires_delta=timedelta(minutes=Config.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    return {"message": "Login Success.....", "access_token": access_token, "token_type": "bearer"}


@router.post("/logout")
def logout():
    # tokens are not tracked server-side, nothing to invalidate
    return {"message": "Logged out successfully"}
