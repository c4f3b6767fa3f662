import logging

from pydantic import EmailStr, field_validator

from .common import RequiredText, SectionModel, reject_null

log = logging.getLogger(__name__)


class PersonalInfo(SectionModel):
    """Holds the resume owner's identity and contact details.

    Attributes:
        first_name (str): Given name, required. Also the first half of the public slug.
        last_name (str): Family name, required. Also the second half of the public slug.
        email (str): Contact email address, required and syntactically valid.
        phone (str | None): Phone number.
        address (str | None): Street address.
        city (str | None): City.
        state (str | None): State or region.
        zip_code (str | None): Postal code.
        country (str | None): Country.
        linkedin (str | None): LinkedIn profile URL.
        github (str | None): GitHub profile URL.
        website (str | None): Personal website URL.
        summary (str | None): Professional summary paragraph.
        profile_picture (str | None): URL or data URI of a profile picture.

    """

    first_name: RequiredText
    last_name: RequiredText
    email: EmailStr
    phone: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    country: str | None = None
    linkedin: str | None = None
    github: str | None = None
    website: str | None = None
    summary: str | None = None
    profile_picture: str | None = None


class PersonalInfoUpdate(SectionModel):
    """Partial personal information sent with an update.

    Only the keys present in the payload are merged into the stored document.
    The required identity fields may be omitted, but when present they must
    be non-empty (an explicit null is rejected).
    """

    first_name: RequiredText | None = None
    last_name: RequiredText | None = None
    email: EmailStr | None = None
    phone: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    country: str | None = None
    linkedin: str | None = None
    github: str | None = None
    website: str | None = None
    summary: str | None = None
    profile_picture: str | None = None

    @field_validator("first_name", "last_name", "email", mode="before")
    @classmethod
    def validate_required_present(cls, v):
        return reject_null(v)

    def to_patch(self) -> dict:
        """Return only the keys the client sent, in the stored camelCase shape."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)
