"""
Pydantic models for the documents embedded in a resume.

Each section model validates one sub-record (education entry, experience
entry, skill, ...) and converts it to the camelCase JSON document that is
stored in the resume row and returned to clients. ``ResumeDocument`` and
``ResumeDocumentUpdate`` describe whole create and update payloads.

Notes:
1. Enables imports such as:
   from resume_builder.app.models.resume import PersonalInfo, ResumeDocument
2. No disk, network, or database access is performed in this package.
"""

from .certifications import Certification
from .education import Education
from .experience import Experience, Project
from .personal import PersonalInfo, PersonalInfoUpdate
from .resume import ResumeDocument, ResumeDocumentUpdate
from .skills import Language, LanguageProficiency, Skill, SkillCategory, SkillLevel

__all__ = [
    "Certification",
    "Education",
    "Experience",
    "Language",
    "LanguageProficiency",
    "PersonalInfo",
    "PersonalInfoUpdate",
    "Project",
    "ResumeDocument",
    "ResumeDocumentUpdate",
    "Skill",
    "SkillCategory",
    "SkillLevel",
]
