import logging
from datetime import datetime, timezone
from typing import Any

from resume_builder.app.models.resume_model import SECTION_FIELDS
from resume_builder.app.models.resume_model import Resume as DatabaseResume

log = logging.getLogger(__name__)


def _format_timestamp(value: datetime | None) -> str | None:
    """Render a stored timestamp as ISO 8601 UTC.

    SQLite hands back naive datetimes; every stored value is UTC, so a naive
    value is tagged as UTC before formatting.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()


def serialize_resume(
    resume: DatabaseResume,
    include_owner: bool = True,
) -> dict[str, Any]:
    """Convert a resume row into its camelCase JSON representation.

    Args:
        resume (DatabaseResume): The resume to serialize.
        include_owner (bool): Whether to include `userId`. The list and public
            projections leave it out.

    Returns:
        dict[str, Any]: The resume document consumed by the editor, the
            templates and the public view.

    Notes:
        1. Sections are copied so callers cannot mutate the ORM state.
        2. `publicSlug` is null while the resume is private.

    """
    data: dict[str, Any] = {
        "id": resume.id,
        "title": resume.title,
        "personalInfo": dict(resume.personal_info or {}),
    }
    for name in SECTION_FIELDS:
        data[name] = [dict(item) for item in (getattr(resume, name) or [])]
    data.update(
        {
            "isDefault": bool(resume.is_default),
            "isPublic": bool(resume.is_public),
            "publicSlug": resume.public_slug,
            "createdAt": _format_timestamp(resume.created_at),
            "updatedAt": _format_timestamp(resume.updated_at),
        },
    )
    if include_owner:
        data["userId"] = resume.user_id
    return data
