import logging

log = logging.getLogger(__name__)


class ResumeValidationError(Exception):
    """Raised when a resume payload fails validation.

    Every failing field is collected, not just the first one.

    Attributes:
        errors (list[dict[str, str]]): One {"field", "message"} entry per violation,
            with dotted field paths such as "personalInfo.email".

    """

    def __init__(self, errors: list[dict[str, str]]):
        self.errors = errors
        super().__init__(
            "Validation failed: " + ", ".join(e["field"] for e in errors),
        )
