import logging
from typing import Annotated

from pydantic import BaseModel, ConfigDict, StringConstraints
from pydantic.alias_generators import to_camel

log = logging.getLogger(__name__)

# A string that must contain something other than whitespace; stored stripped.
RequiredText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class SectionModel(BaseModel):
    """Base for every embedded resume document.

    Fields are snake_case in Python and camelCase on the wire. Unknown keys
    (including client-sent ``_id`` values) are dropped, and every string is
    stripped of surrounding whitespace.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        extra="ignore",
    )

    def to_document(self) -> dict:
        """Return the JSON document stored in the database and sent to clients."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def clean_text_list(v):
    """Strip every entry of a list of strings and drop the empty ones.

    Args:
        v: The list value to clean. None is treated as an empty list.

    Returns:
        list[str]: The cleaned list, order preserved.

    Raises:
        ValueError: If the value is not a list of strings.

    """
    if v is None:
        return []
    if not isinstance(v, list):
        raise ValueError("must be a list of strings")
    cleaned = []
    for item in v:
        if not isinstance(item, str):
            raise ValueError("must be a list of strings")
        if item.strip():
            cleaned.append(item.strip())
    return cleaned


def reject_null(v):
    """Reject an explicit null sent for a key whose value must be present."""
    if v is None:
        raise ValueError("cannot be null")
    return v
