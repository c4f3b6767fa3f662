import logging
from typing import Annotated

from fastapi import Depends, HTTPException, status
from jose import JWTError, jwt
from sqlalchemy.orm import Session

from resume_builder.app.core.config import get_settings
from resume_builder.app.core.security import oauth2_scheme
from resume_builder.app.database.database import get_db
from resume_builder.app.models.user import User

log = logging.getLogger(__name__)


def get_current_user(
    token: Annotated[str, Depends(oauth2_scheme)],
    db: Session = Depends(get_db),
) -> User:
    """Resolve the authenticated owner from the bearer token.

    Args:
        token: JWT token extracted from the Authorization header.
        db: Database session dependency used to look up the user.

    Returns:
        User: The active User whose id is the token's subject.

    Raises:
        HTTPException: 401 UNAUTHORIZED with detail "Could not validate credentials"
            and a "WWW-Authenticate: Bearer" header.

    Notes:
        1. Decode the JWT token using the secret key and algorithm to extract the subject (user id).
        2. If the subject is missing or not an integer, raise the credentials exception.
        3. If the JWT token is invalid, expired, or malformed, raise the credentials exception.
        4. Query the database for the user; an unknown or inactive user is rejected.

    Database Access:
        - Queries the User table to retrieve a user record by id.

    """
    settings = get_settings()
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    try:
        payload = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.algorithm],
        )
        subject = payload.get("sub")
        if subject is None:
            raise credentials_exception
        user_id = int(subject)
    except (JWTError, ValueError):
        _msg = "Rejected bearer token"
        log.warning(_msg)
        raise credentials_exception

    user = db.query(User).filter(User.id == user_id).first()
    if user is None or not user.is_active:
        _msg = f"Token subject {user_id} does not match an active user"
        log.warning(_msg)
        raise credentials_exception

    return user
