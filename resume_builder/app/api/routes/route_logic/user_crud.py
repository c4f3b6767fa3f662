import logging

from sqlalchemy.orm import Session

from resume_builder.app.core.security import get_password_hash
from resume_builder.app.models.user import User, UserData

log = logging.getLogger(__name__)


def get_user_by_email(db: Session, email: str) -> User | None:
    """Retrieve a user by email address, case-insensitively.

    Args:
        db (Session): The database session.
        email (str): The email address to look up.

    Returns:
        User | None: The matching user, or None.

    Notes:
        1. Emails are stored lower-cased, so the lookup value is lower-cased too.
        2. This function performs a database read operation.

    """
    _msg = f"Querying database for email: {email}"
    log.debug(_msg)
    return db.query(User).filter(User.email == email.strip().lower()).first()


def create_user(
    db: Session,
    first_name: str,
    last_name: str,
    email: str,
    password: str,
) -> User:
    """Create and save a new user.

    Args:
        db (Session): The database session.
        first_name (str): Given name.
        last_name (str): Family name.
        email (str): Login email; must not already be registered.
        password (str): Plain text password, hashed before storage.

    Returns:
        User: The newly created user.

    Notes:
        1. Hash the password with bcrypt.
        2. Add the user, commit, and refresh to obtain the generated id.
        3. This function performs a database write operation.

    """
    _msg = f"Creating new user: {email}"
    log.debug(_msg)
    user = User(
        data=UserData(
            first_name=first_name,
            last_name=last_name,
            email=email,
            hashed_password=get_password_hash(password),
        ),
    )
    db.add(user)
    db.commit()
    db.refresh(user)

    _msg = f"Created user {user.id} ({user.email})"
    log.info(_msg)
    return user
