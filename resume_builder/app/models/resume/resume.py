import logging

from pydantic import field_validator

from .certifications import Certification
from .common import RequiredText, SectionModel, reject_null
from .education import Education
from .experience import Experience, Project
from .personal import PersonalInfo, PersonalInfoUpdate
from .skills import Language, Skill

log = logging.getLogger(__name__)


class ResumeDocument(SectionModel):
    """
    A complete resume as submitted on create.

    Server-owned keys (id, userId, publicSlug, createdAt, updatedAt) are not
    fields of this model, so a client cannot set them.

    Attributes:
        title (str): The resume title shown on the dashboard.
        personal_info (PersonalInfo): Identity and contact details.
        education (list[Education]): Education entries in display order.
        experience (list[Experience]): Work experience entries in display order.
        skills (list[Skill]): Skills in display order.
        projects (list[Project]): Projects in display order.
        certifications (list[Certification]): Certifications in display order.
        languages (list[Language]): Spoken languages in display order.
        is_default (bool): Make this the owner's default resume.
        is_public (bool): Publish this resume under a generated slug.

    """

    title: RequiredText
    personal_info: PersonalInfo
    education: list[Education] = []
    experience: list[Experience] = []
    skills: list[Skill] = []
    projects: list[Project] = []
    certifications: list[Certification] = []
    languages: list[Language] = []
    is_default: bool = False
    is_public: bool = False


class ResumeDocumentUpdate(SectionModel):
    """
    A partial resume sent with an update.

    Keys absent from the payload are left untouched on the stored resume.
    Keys that are present are validated with the same rules as on create,
    and an explicit null is rejected for every key.
    """

    title: RequiredText | None = None
    personal_info: PersonalInfoUpdate | None = None
    education: list[Education] | None = None
    experience: list[Experience] | None = None
    skills: list[Skill] | None = None
    projects: list[Project] | None = None
    certifications: list[Certification] | None = None
    languages: list[Language] | None = None
    is_default: bool | None = None
    is_public: bool | None = None

    @field_validator("*", mode="before")
    @classmethod
    def validate_not_null(cls, v):
        return reject_null(v)
