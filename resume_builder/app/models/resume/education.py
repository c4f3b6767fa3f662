import logging

from .common import RequiredText, SectionModel

log = logging.getLogger(__name__)


class Education(SectionModel):
    """Represents one education entry.

    Attributes:
        institution (str): The name of the educational institution.
        degree (str): The degree earned or pursued (e.g. Bachelor of Science).
        field_of_study (str | None): The major or field of study.
        start_date (str): When the program started, as entered by the user.
        end_date (str | None): When the program ended, if it has.
        gpa (str | None): The grade point average, free-form.
        description (str | None): Additional notes such as honors or coursework.

    """

    institution: RequiredText
    degree: RequiredText
    field_of_study: str | None = None
    start_date: RequiredText
    end_date: str | None = None
    gpa: str | None = None
    description: str | None = None
