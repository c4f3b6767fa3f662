import logging
from typing import Any

from pydantic import BaseModel

log = logging.getLogger(__name__)


class ResumeListResponse(BaseModel):
    """Response model for listing resumes.

    Attributes:
        resumes (list[dict[str, Any]]): The owner's resumes, most recently updated
            first, without the userId field.
        count (int): The number of resumes returned.

    """

    resumes: list[dict[str, Any]]
    count: int


class ResumeDetailResponse(BaseModel):
    """Response model wrapping a single resume.

    Attributes:
        resume (dict[str, Any]): The serialized resume.

    """

    resume: dict[str, Any]


class ResumeActionResponse(BaseModel):
    """Response model for an operation that returns the affected resume.

    Attributes:
        message (str): Human readable outcome of the operation.
        resume (dict[str, Any]): The created or updated resume.

    """

    message: str
    resume: dict[str, Any]


class MessageResponse(BaseModel):
    """Response model carrying only a message."""

    message: str


class ValidationErrorItem(BaseModel):
    """One failing field of a rejected resume payload."""

    field: str
    message: str


class ValidationErrorResponse(BaseModel):
    """Body of a 400 response for a rejected resume payload.

    Attributes:
        message (str): Always "Validation failed".
        errors (list[ValidationErrorItem]): Every failing field.

    """

    message: str = "Validation failed"
    errors: list[ValidationErrorItem]
