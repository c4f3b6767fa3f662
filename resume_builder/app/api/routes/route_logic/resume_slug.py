import logging
import re

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from resume_builder.app.core.config import get_settings
from resume_builder.app.models.resume_model import Resume as DatabaseResume

log = logging.getLogger(__name__)

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]+")
FALLBACK_SLUG = "resume"


def build_base_slug(first_name: str | None, last_name: str | None) -> str:
    """Build the base public slug from the owner's name.

    Args:
        first_name (str | None): The first name from the resume's personal info.
        last_name (str | None): The last name from the resume's personal info.

    Returns:
        str: The lower-cased "first-last" slug with every run of characters
            outside [a-z0-9] collapsed into a single hyphen and no leading or
            trailing hyphen. "resume" when nothing usable remains.

    """
    raw = f"{first_name or ''}-{last_name or ''}".lower()
    slug = _NON_SLUG_CHARS.sub("-", raw).strip("-")
    return slug or FALLBACK_SLUG


def _slug_in_use(db: Session, slug: str, exclude_id: int | None) -> bool:
    query = db.query(DatabaseResume.id).filter(DatabaseResume.public_slug == slug)
    if exclude_id is not None:
        query = query.filter(DatabaseResume.id != exclude_id)
    return query.first() is not None


def find_available_slug(
    db: Session,
    base_slug: str,
    exclude_id: int | None = None,
) -> str:
    """Return the base slug, or the first free "base-N" suffix.

    Args:
        db (Session): The database session.
        base_slug (str): The slug built by `build_base_slug`.
        exclude_id (int | None): A resume whose own slug does not count as taken.

    Returns:
        str: `base_slug` if unused, otherwise `base_slug-1`, `base_slug-2`, ...
            whichever is the first unused value.

    Notes:
        1. Checks the database once per candidate.
        2. The answer is only a candidate: a concurrent writer can take it before
           the caller commits. `assign_public_slug` handles that race.

    """
    slug = base_slug
    counter = 1
    while _slug_in_use(db, slug, exclude_id):
        slug = f"{base_slug}-{counter}"
        counter += 1
    return slug


def assign_public_slug(db: Session, resume: DatabaseResume) -> str:
    """Assign a globally unique public slug to a resume.

    Args:
        db (Session): The database session, inside the caller's transaction.
        resume (DatabaseResume): The resume being published. Must not hold a slug yet.

    Returns:
        str: The assigned slug.

    Raises:
        IntegrityError: If every attempt lost the race for its candidate slug.

    Notes:
        1. Flush pending changes so only the slug write happens inside the savepoint.
        2. Pick a candidate with `find_available_slug`.
        3. Write it inside a SAVEPOINT. The unique constraint on public_slug is the
           final authority: on IntegrityError the savepoint is rolled back and a
           new candidate is searched for.
        4. Give up after `slug_max_attempts` attempts.
        5. This function performs database reads and writes but does not commit.

    """
    settings = get_settings()
    first_name = (resume.personal_info or {}).get("firstName")
    last_name = (resume.personal_info or {}).get("lastName")
    base_slug = build_base_slug(first_name, last_name)

    db.flush()

    attempts = max(settings.slug_max_attempts, 1)
    for attempt in range(1, attempts + 1):
        candidate = find_available_slug(db, base_slug, exclude_id=resume.id)
        try:
            with db.begin_nested():
                resume.public_slug = candidate
                db.flush()
            break
        except IntegrityError:
            _msg = (
                f"Public slug '{candidate}' was taken concurrently "
                f"(attempt {attempt}/{attempts})"
            )
            log.warning(_msg)
            if attempt == attempts:
                raise

    _msg = f"Assigned public slug '{candidate}' to resume {resume.id}"
    log.info(_msg)
    return candidate
