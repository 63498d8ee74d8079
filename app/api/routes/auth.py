"""Account routes: registration and bearer-token login."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.schemas.user import LoginRequest, Token, UserCreate, UserResponse
from app.services.auth import authenticate_user, create_access_token, create_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"])


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(user_data: UserCreate, db: Session = Depends(get_db)) -> UserResponse:
    """Register an account that can own apartments."""
    user = create_user(db, user_data)
    return UserResponse.model_validate(user)


@router.post("/login", response_model=Token)
def login(credentials: LoginRequest, db: Session = Depends(get_db)) -> Token:
    """Exchange a username and password for a bearer token."""
    user = authenticate_user(db, credentials.username, credentials.password)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect username or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    logger.info("Issued token for %s", user.username, extra={"user_id": user.id})
    return Token(access_token=create_access_token(data={"sub": user.username}), token_type="bearer")
