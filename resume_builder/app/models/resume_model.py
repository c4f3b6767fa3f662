import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from sqlalchemy import JSON, Boolean, Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship

from resume_builder.app.models import Base

log = logging.getLogger(__name__)

JSONDocument = JSONB().with_variant(JSON, "sqlite")

# Ordered sub-record lists, in display order.
SECTION_FIELDS = (
    "education",
    "experience",
    "skills",
    "projects",
    "certifications",
    "languages",
)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Visibility(str, Enum):
    """Publication state of a resume."""

    PRIVATE = "private"
    PUBLIC = "public"


@dataclass
class ResumeData:
    """Dataclass to hold data for Resume initialization."""

    user_id: int
    title: str
    personal_info: dict[str, Any]
    education: list[dict[str, Any]] = field(default_factory=list)
    experience: list[dict[str, Any]] = field(default_factory=list)
    skills: list[dict[str, Any]] = field(default_factory=list)
    projects: list[dict[str, Any]] = field(default_factory=list)
    certifications: list[dict[str, Any]] = field(default_factory=list)
    languages: list[dict[str, Any]] = field(default_factory=list)
    is_default: bool = False
    is_public: bool = False


class Resume(Base):
    """Resume model storing one structured resume document.

    Sub-records are embedded JSON documents stored in the camelCase wire shape;
    they are not independently owned and are deleted with the resume.

    Attributes:
        id (int): Unique identifier for the resume.
        user_id (int): Foreign key to the owning User. Never changes after creation.
        title (str): User-assigned title, non-empty.
        personal_info (dict): firstName, lastName, email and optional contact fields.
        education (list[dict]): Education entries in display order.
        experience (list[dict]): Work experience entries in display order.
        skills (list[dict]): Skill entries in display order.
        projects (list[dict]): Project entries in display order.
        certifications (list[dict]): Certification entries in display order.
        languages (list[dict]): Spoken language entries in display order.
        is_default (bool): Whether this is the owner's default resume. At most one per owner.
        is_public (bool): Whether the resume is readable anonymously by its slug.
        public_slug (str | None): Globally unique slug, set exactly when is_public is True.
        created_at (datetime): Timestamp when the resume was created.
        updated_at (datetime): Timestamp of the last mutation of this resume.

    """

    __tablename__ = "resumes"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String, nullable=False)
    personal_info = Column(JSONDocument, nullable=False)
    education = Column(JSONDocument, nullable=False, default=list)
    experience = Column(JSONDocument, nullable=False, default=list)
    skills = Column(JSONDocument, nullable=False, default=list)
    projects = Column(JSONDocument, nullable=False, default=list)
    certifications = Column(JSONDocument, nullable=False, default=list)
    languages = Column(JSONDocument, nullable=False, default=list)
    is_default = Column(Boolean, default=False, nullable=False)
    is_public = Column(Boolean, default=False, nullable=False)
    public_slug = Column(String, unique=True, nullable=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    # Relationship to User
    user = relationship("User", back_populates="resumes")

    def __init__(self, data: ResumeData):
        """Initialize a Resume instance.

        Args:
            data (ResumeData): An object containing the data for the new resume.

        Notes:
            1. Assigns attributes from the `data` object to the `Resume` instance.
            2. This constructor does not perform validation; payloads are validated
               before a ResumeData is built.
            3. public_slug is never taken from the caller; it is assigned by the store.

        """
        _msg = f"Initializing Resume with title: {data.title}"
        log.debug(_msg)

        self.user_id = data.user_id
        self.title = data.title
        self.personal_info = data.personal_info
        for name in SECTION_FIELDS:
            setattr(self, name, getattr(data, name))
        self.is_default = data.is_default
        self.is_public = data.is_public
        self.public_slug = None

    @property
    def visibility(self) -> Visibility:
        return Visibility.PUBLIC if self.is_public else Visibility.PRIVATE

    def __repr__(self) -> str:
        return f"<Resume id={self.id} user_id={self.user_id} title={self.title!r}>"
