import logging
from enum import Enum

from .common import RequiredText, SectionModel

log = logging.getLogger(__name__)


class SkillLevel(str, Enum):
    """Self-assessed skill level."""

    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    EXPERT = "Expert"


class SkillCategory(str, Enum):
    """Grouping used when a template lists skills by category."""

    TECHNICAL = "Technical"
    SOFT_SKILLS = "Soft Skills"
    LANGUAGES = "Languages"
    TOOLS = "Tools"
    OTHER = "Other"


class LanguageProficiency(str, Enum):
    """Spoken language proficiency."""

    BASIC = "Basic"
    CONVERSATIONAL = "Conversational"
    PROFESSIONAL = "Professional"
    NATIVE = "Native"


class Skill(SectionModel):
    """
    Represents one skill.

    Attributes:
        name (str): The skill name.
        level (SkillLevel): Self-assessed level, Intermediate when omitted.
        category (SkillCategory): Grouping, Technical when omitted.

    """

    name: RequiredText
    level: SkillLevel = SkillLevel.INTERMEDIATE
    category: SkillCategory = SkillCategory.TECHNICAL


class Language(SectionModel):
    """
    Represents a spoken language.

    Attributes:
        name (str): The language name.
        proficiency (LanguageProficiency): Proficiency, Professional when omitted.

    """

    name: RequiredText
    proficiency: LanguageProficiency = LanguageProficiency.PROFESSIONAL
