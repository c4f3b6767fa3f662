import logging
from dataclasses import dataclass
from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, Integer, String
from sqlalchemy.orm import relationship, validates

from resume_builder.app.models import Base

log = logging.getLogger(__name__)


@dataclass
class UserData:
    """Dataclass to hold data for User initialization."""

    first_name: str
    last_name: str
    email: str
    hashed_password: str
    is_active: bool = True
    id_: int | None = None


class User(Base):
    """
    User model for authentication and resume ownership.

    Attributes:
        id (int): Unique identifier for the user.
        first_name (str): The user's given name.
        last_name (str): The user's family name.
        email (str): Unique, lower-cased email address used to log in.
        hashed_password (str): bcrypt hash of the user's password.
        is_active (bool): Whether the user account is active.
        created_at (datetime): Timestamp when the account was created.
        resumes (list[Resume]): Resumes owned by the user.

    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(
        DateTime,
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    # Relationship to Resume
    resumes = relationship(
        "Resume",
        back_populates="user",
        cascade="all, delete-orphan",
    )

    def __init__(self, data: UserData):
        """
        Initialize a User instance.

        Args:
            data (UserData): The values for the new user.

        Notes:
            1. Assign all values to instance attributes; the @validates hooks
               strip and check them.
            2. The id is only assigned when given, for testing purposes.
            3. This operation does not involve network, disk, or database access.

        """
        _msg = f"Initializing User with email: {data.email}"
        log.debug(_msg)

        if data.id_ is not None:
            self.id = data.id_
        self.first_name = data.first_name
        self.last_name = data.last_name
        self.email = data.email
        self.hashed_password = data.hashed_password
        self.is_active = data.is_active

    @validates("first_name", "last_name")
    def validate_name(self, key, value):
        """
        Validate the first and last name fields.

        Args:
            key (str): The field name being validated.
            value (str): The name to validate. Must be a non-empty string.

        Returns:
            str: The name stripped of leading/trailing whitespace.

        """
        if not isinstance(value, str):
            raise ValueError(f"{key} must be a string")
        if not value.strip():
            raise ValueError(f"{key} cannot be empty")
        return value.strip()

    @validates("email")
    def validate_email(self, key, email):
        """
        Validate the email field.

        Returns:
            str: The email stripped and lower-cased, so lookups are case-insensitive.

        """
        if not isinstance(email, str):
            raise ValueError("Email must be a string")
        if not email.strip():
            raise ValueError("Email cannot be empty")
        return email.strip().lower()

    @validates("hashed_password")
    def validate_hashed_password(self, key, hashed_password):
        if not isinstance(hashed_password, str):
            raise ValueError("Hashed password must be a string")
        if not hashed_password.strip():
            raise ValueError("Hashed password cannot be empty")
        return hashed_password.strip()

    @validates("is_active")
    def validate_is_active(self, key, is_active):
        if not isinstance(is_active, bool):
            raise ValueError("is_active must be a boolean")
        return is_active
