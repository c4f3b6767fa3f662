import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from resume_builder.app.api.routes.route_logic import user_crud
from resume_builder.app.core.auth import get_current_user
from resume_builder.app.core.config import Settings, get_settings
from resume_builder.app.core.security import authenticate_user, create_access_token
from resume_builder.app.database.database import get_db
from resume_builder.app.models.user import User
from resume_builder.app.schemas.user import (
    AuthResponse,
    CurrentUserResponse,
    UserLogin,
    UserResponse,
    UserSignup,
)

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


def _auth_response(message: str, user: User, settings: Settings) -> AuthResponse:
    token = create_access_token(data={"sub": str(user.id)}, settings=settings)
    return AuthResponse(
        message=message,
        token=token,
        user=UserResponse.model_validate(user),
    )


@router.post("/signup", status_code=status.HTTP_201_CREATED)
def signup(
    user: UserSignup,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> AuthResponse:
    """Register a new user and log them in.

    Args:
        user (UserSignup): First name, last name, email, and password.
        db (Session): The database session.
        settings (Settings): The application settings.

    Returns:
        AuthResponse: A welcome message, a bearer token, and the new user.

    Raises:
        HTTPException: 400 if the email is already registered.

    Notes:
        1. Reject an email that is already registered.
        2. Create the user with a bcrypt-hashed password.
        3. Issue an access token so the client is logged in immediately.
        4. Database access: Performs read and write operations on the users table.

    """
    if user_crud.get_user_by_email(db, user.email):
        _msg = f"Signup rejected, email already registered: {user.email}"
        log.info(_msg)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="User already exists with this email",
        )

    db_user = user_crud.create_user(
        db,
        first_name=user.first_name,
        last_name=user.last_name,
        email=user.email,
        password=user.password,
    )
    return _auth_response("User created successfully", db_user, settings)


@router.post("/login")
def login(
    credentials: UserLogin,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> AuthResponse:
    """Exchange an email and password for a bearer token.

    Raises:
        HTTPException: 401 if the credentials do not match an active user.

    """
    user = authenticate_user(db, credentials.email, credentials.password)
    if not user:
        _msg = f"Failed login for {credentials.email}"
        log.warning(_msg)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return _auth_response("Login successful", user, settings)


@router.get("/me")
def read_current_user(
    current_user: Annotated[User, Depends(get_current_user)],
) -> CurrentUserResponse:
    """Return the user that owns the bearer token."""
    return CurrentUserResponse(user=UserResponse.model_validate(current_user))
