import logging

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel

log = logging.getLogger(__name__)


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


class UserSignup(_CamelModel):
    """User registration schema.

    Attributes:
        first_name (str): Given name, also used to pre-fill new resumes.
        last_name (str): Family name.
        email (EmailStr): Login email, unique across users.
        password (str): Plain text password, at least 6 characters. Only its
            bcrypt hash is stored.

    """

    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    email: EmailStr
    password: str = Field(min_length=6)


class UserLogin(_CamelModel):
    """User login schema.

    Attributes:
        email (EmailStr): Login email.
        password (str): Plain text password.

    """

    email: EmailStr
    password: str


class UserResponse(_CamelModel):
    """User representation returned to clients, without the password hash."""

    id: int
    first_name: str
    last_name: str
    email: EmailStr

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class AuthResponse(BaseModel):
    """Returned by signup and login.

    Attributes:
        message (str): Human readable outcome.
        token (str): Bearer token for the Authorization header.
        user (UserResponse): The authenticated user.

    """

    message: str
    token: str
    user: UserResponse


class CurrentUserResponse(BaseModel):
    """Returned by the current-user endpoint."""

    user: UserResponse
