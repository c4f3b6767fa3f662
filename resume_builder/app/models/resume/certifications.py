import logging

from .common import RequiredText, SectionModel

log = logging.getLogger(__name__)


class Certification(SectionModel):
    """
    Represents a professional certification.

    Attributes:
        name (str): The name of the certification.
        issuer (str): The organization that issued the certification.
        date (str): When the certification was issued, as entered by the user.
        url (str | None): A verification link.

    """

    name: RequiredText
    issuer: RequiredText
    date: RequiredText
    url: str | None = None
