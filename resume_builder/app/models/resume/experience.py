import logging

from pydantic import field_validator

from .common import RequiredText, SectionModel, clean_text_list

log = logging.getLogger(__name__)


class Experience(SectionModel):
    """
    Represents one position held at a company.

    Attributes:
        company (str): The employer.
        position (str): The job title.
        location (str | None): Where the job was based.
        start_date (str): When the position started, as entered by the user.
        end_date (str | None): When the position ended; ignored by renderers when `current` is set.
        current (bool): Whether this is the user's current position.
        description (str): What the role involved.
        achievements (list[str]): Bullet points, in display order.

    """

    company: RequiredText
    position: RequiredText
    location: str | None = None
    start_date: RequiredText
    end_date: str | None = None
    current: bool = False
    description: RequiredText
    achievements: list[str] = []

    @field_validator("achievements", mode="before")
    @classmethod
    def validate_achievements(cls, v):
        """
        Validate the achievements field.

        Args:
            v: The achievements value to validate. Must be a list of strings or None.

        Returns:
            list[str]: The stripped achievements with blank entries removed.

        Notes:
            1. Ensure achievements is a list of strings.
            2. Strip whitespace from each entry and filter out empty strings,
               which the editor leaves behind when a bullet is cleared.

        """
        return clean_text_list(v)


class Project(SectionModel):
    """
    Represents a personal or professional project.

    Attributes:
        name (str): The project name.
        description (str): What the project does.
        technologies (list[str]): Technologies used, in display order.
        url (str | None): Live project URL.
        github_url (str | None): Source repository URL.
        start_date (str | None): When work started.
        end_date (str | None): When work ended.

    """

    name: RequiredText
    description: RequiredText
    technologies: list[str] = []
    url: str | None = None
    github_url: str | None = None
    start_date: str | None = None
    end_date: str | None = None

    @field_validator("technologies", mode="before")
    @classmethod
    def validate_technologies(cls, v):
        return clean_text_list(v)
