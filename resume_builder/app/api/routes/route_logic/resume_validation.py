import logging
from typing import Any

from pydantic import ValidationError

from resume_builder.app.core.exceptions import ResumeValidationError
from resume_builder.app.models.resume import ResumeDocument, ResumeDocumentUpdate

log = logging.getLogger(__name__)

CREATE_MESSAGES = {
    "title": "Title is required",
    "personalInfo.firstName": "First name is required",
    "personalInfo.lastName": "Last name is required",
    "personalInfo.email": "Valid email is required",
}

UPDATE_MESSAGES = {
    "title": "Title cannot be empty",
    "personalInfo.firstName": "First name cannot be empty",
    "personalInfo.lastName": "Last name cannot be empty",
    "personalInfo.email": "Valid email is required",
}


def _collect_errors(
    exc: ValidationError,
    messages: dict[str, str],
) -> list[dict[str, str]]:
    """Flatten a pydantic ValidationError into one entry per failing field.

    Args:
        exc (ValidationError): The error raised by the payload model.
        messages (dict[str, str]): Friendly messages keyed by dotted field path.

    Returns:
        list[dict[str, str]]: {"field", "message"} entries in the order pydantic
            reported them, one per field.

    Notes:
        1. Join each error location with dots, e.g. ("experience", 0, "company")
           becomes "experience.0.company".
        2. Use the friendly message for the field when one exists, otherwise
           pydantic's own message.
        3. Keep only the first error for a field.

    """
    errors: list[dict[str, str]] = []
    seen: set[str] = set()
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"]) or "body"
        if field in seen:
            continue
        seen.add(field)
        errors.append({"field": field, "message": messages.get(field, error["msg"])})
    return errors


def _require_object(payload: Any) -> dict[str, Any]:
    if not isinstance(payload, dict):
        raise ResumeValidationError(
            [{"field": "body", "message": "Request body must be a JSON object"}],
        )
    return payload


def validate_resume_create(payload: Any) -> ResumeDocument:
    """Validate a complete resume payload for create.

    Args:
        payload (Any): The decoded JSON request body.

    Returns:
        ResumeDocument: The validated, normalized document.

    Raises:
        ResumeValidationError: Listing every failing field, not just the first.

    Notes:
        1. Reject a body that is not a JSON object.
        2. A missing or null personalInfo is validated as an empty object so that each of
           its required fields is reported individually.
        3. Validate against ResumeDocument and translate any pydantic errors.

    """
    data = dict(_require_object(payload))
    if data.get("personalInfo") is None:
        data["personalInfo"] = {}
    try:
        return ResumeDocument.model_validate(data)
    except ValidationError as e:
        errors = _collect_errors(e, CREATE_MESSAGES)
        _msg = f"Resume create payload rejected: {[err['field'] for err in errors]}"
        log.info(_msg)
        raise ResumeValidationError(errors) from e


def validate_resume_update(payload: Any) -> ResumeDocumentUpdate:
    """Validate a partial resume payload for update.

    Only keys present in the payload are validated; absent keys are not
    required. Present keys follow the create rules.

    Args:
        payload (Any): The decoded JSON request body.

    Returns:
        ResumeDocumentUpdate: The validated partial document. Use
            ``model_fields_set`` to know which keys were sent.

    Raises:
        ResumeValidationError: Listing every failing field.

    """
    data = _require_object(payload)
    try:
        return ResumeDocumentUpdate.model_validate(data)
    except ValidationError as e:
        errors = _collect_errors(e, UPDATE_MESSAGES)
        _msg = f"Resume update payload rejected: {[err['field'] for err in errors]}"
        log.info(_msg)
        raise ResumeValidationError(errors) from e
