import copy
import logging

from fastapi import HTTPException
from sqlalchemy.orm import Session

from resume_builder.app.api.routes.route_logic.resume_slug import assign_public_slug
from resume_builder.app.models.resume import ResumeDocument, ResumeDocumentUpdate
from resume_builder.app.models.resume_model import SECTION_FIELDS, ResumeData, utcnow
from resume_builder.app.models.resume_model import Resume as DatabaseResume

log = logging.getLogger(__name__)

# Largest value of the INTEGER primary key column.
MAX_RESUME_ID = 2**31 - 1


def get_resume_by_id_and_user(
    db: Session,
    resume_id: int,
    user_id: int,
) -> DatabaseResume:
    """Retrieve a resume by its ID and verify it belongs to the specified user.

    Args:
        db (Session): The SQLAlchemy database session used to query the database.
        resume_id (int): The unique identifier for the resume to retrieve.
        user_id (int): The unique identifier for the user who owns the resume.

    Returns:
        DatabaseResume: The resume object matching the provided ID and user ID.

    Raises:
        HTTPException: 404 "Resume not found" if no resume has this ID for this user.
            A resume owned by someone else is reported the same way, so ownership
            is not disclosed.

    Notes:
        1. Query the resumes table for a record matching both resume_id and user_id.
        2. An id outside the range of the id column cannot exist and is
           reported as not found without querying.
        3. This function performs at most one database query.

    """
    resume = None
    if 1 <= resume_id <= MAX_RESUME_ID:
        resume = (
            db.query(DatabaseResume)
            .filter(
                DatabaseResume.id == resume_id,
                DatabaseResume.user_id == user_id,
            )
            .first()
        )

    if not resume:
        _msg = f"Resume {resume_id} not found for user {user_id}"
        log.debug(_msg)
        raise HTTPException(status_code=404, detail="Resume not found")

    return resume


def get_user_resumes(db: Session, user_id: int) -> list[DatabaseResume]:
    """Retrieve all resumes of a user, most recently updated first.

    Args:
        db (Session): The SQLAlchemy database session used to query the database.
        user_id (int): The owner whose resumes are listed.

    Returns:
        list[DatabaseResume]: The user's resumes ordered by updated_at descending,
            ties broken by id descending.

    """
    return (
        db.query(DatabaseResume)
        .filter(DatabaseResume.user_id == user_id)
        .order_by(DatabaseResume.updated_at.desc(), DatabaseResume.id.desc())
        .all()
    )


def clear_other_defaults(db: Session, user_id: int, keep_id: int) -> int:
    """Unset the default flag on every resume of a user except one.

    Args:
        db (Session): The database session, inside the caller's transaction.
        user_id (int): The owner whose resumes are updated.
        keep_id (int): The resume that keeps (or is about to receive) the flag.

    Returns:
        int: The number of resumes that lost the flag.

    Notes:
        1. Runs as one bulk UPDATE in the caller's transaction, so it commits
           together with the write that sets the new default.
        2. The cleared resumes keep their updated_at; losing the flag is not an
           edit of their content.
        3. Clears every other default, so a state with several defaults left by
           concurrent writers is repaired too.

    """
    cleared = (
        db.query(DatabaseResume)
        .filter(
            DatabaseResume.user_id == user_id,
            DatabaseResume.id != keep_id,
            DatabaseResume.is_default.is_(True),
        )
        .update(
            {
                DatabaseResume.is_default: False,
                DatabaseResume.updated_at: DatabaseResume.updated_at,
            },
            synchronize_session="fetch",
        )
    )
    if cleared:
        _msg = f"Cleared default flag on {cleared} other resume(s) of user {user_id}"
        log.debug(_msg)
    return cleared


def apply_visibility(db: Session, resume: DatabaseResume) -> None:
    """Keep public_slug consistent with is_public.

    Args:
        db (Session): The database session, inside the caller's transaction.
        resume (DatabaseResume): The resume being written.

    Notes:
        1. A private resume never keeps a slug; making a resume private through
           any path clears it.
        2. A public resume without a slug gets one from `assign_public_slug`.
        3. A public resume that already has a slug keeps it.

    """
    if not resume.is_public:
        if resume.public_slug is not None:
            _msg = f"Clearing public slug '{resume.public_slug}' of resume {resume.id}"
            log.info(_msg)
            resume.public_slug = None
        return
    if resume.public_slug is None:
        assign_public_slug(db, resume)


def _save(db: Session, resume: DatabaseResume) -> DatabaseResume:
    """Refresh updated_at, enforce both invariants, and commit.

    Notes:
        1. Flush so a new resume has an id before siblings are compared to it.
        2. If the resume is the default, clear the flag on its siblings.
        3. Normalize the public slug.
        4. Commit everything as one transaction and refresh the resume.

    """
    resume.updated_at = utcnow()
    db.flush()
    if resume.is_default:
        clear_other_defaults(db, user_id=resume.user_id, keep_id=resume.id)
    apply_visibility(db, resume)
    db.commit()
    db.refresh(resume)
    return resume


def create_resume(
    db: Session,
    user_id: int,
    document: ResumeDocument,
) -> DatabaseResume:
    """Create and save a new resume.

    Args:
        db (Session): The database session.
        user_id (int): The owner of the new resume.
        document (ResumeDocument): The validated resume content.

    Returns:
        DatabaseResume: The newly created resume.

    Notes:
        1. Build the row from the validated document; sections are stored in
           their camelCase document form.
        2. If the document asks to be the default, the owner's other resumes
           lose the flag in the same transaction.
        3. If the document asks to be public, a slug is assigned in the same
           transaction.
        4. This function performs database reads and writes.

    """
    resume_data = ResumeData(
        user_id=user_id,
        title=document.title,
        personal_info=document.personal_info.to_document(),
        is_default=document.is_default,
        is_public=document.is_public,
        **{
            name: [item.to_document() for item in getattr(document, name)]
            for name in SECTION_FIELDS
        },
    )
    resume = DatabaseResume(data=resume_data)
    db.add(resume)
    _save(db, resume)

    _msg = f"Created resume {resume.id} for user {user_id}"
    log.info(_msg)
    return resume


def update_resume(
    db: Session,
    resume: DatabaseResume,
    changes: ResumeDocumentUpdate,
) -> DatabaseResume:
    """Merge a partial update into a resume.

    Args:
        db (Session): The database session.
        resume (DatabaseResume): The resume to update, already scoped to its owner.
        changes (ResumeDocumentUpdate): The validated partial document.

    Returns:
        DatabaseResume: The updated resume.

    Notes:
        1. Only keys the client sent are applied; everything else is left untouched.
        2. personalInfo is merged key by key into the stored object.
        3. A section list that is sent replaces the stored list.
        4. isDefault and isPublic go through the same invariants as on create.
           Setting isPublic to false clears the slug.
        5. This function performs database reads and writes.

    """
    sent = changes.model_fields_set

    if "title" in sent:
        resume.title = changes.title
    if "personal_info" in sent:
        merged = dict(resume.personal_info or {})
        merged.update(changes.personal_info.to_patch())
        resume.personal_info = merged
    for name in SECTION_FIELDS:
        if name in sent:
            setattr(
                resume,
                name,
                [item.to_document() for item in getattr(changes, name)],
            )
    if "is_default" in sent:
        resume.is_default = changes.is_default
    if "is_public" in sent:
        resume.is_public = changes.is_public

    _save(db, resume)

    _msg = f"Updated resume {resume.id} ({', '.join(sorted(sent)) or 'no fields'})"
    log.info(_msg)
    return resume


def delete_resume(db: Session, resume: DatabaseResume) -> None:
    """Delete a resume.

    Args:
        db (Session): The database session.
        resume (DatabaseResume): The resume to delete, already scoped to its owner.

    Notes:
        1. Sub-records are embedded, so nothing else is removed.
        2. This function performs a database write operation.

    """
    resume_id = resume.id
    db.delete(resume)
    db.commit()

    _msg = f"Deleted resume {resume_id}"
    log.info(_msg)


def set_default_resume(db: Session, resume: DatabaseResume) -> DatabaseResume:
    """Make a resume its owner's only default.

    Args:
        db (Session): The database session.
        resume (DatabaseResume): The resume to make default, already scoped to its owner.

    Returns:
        DatabaseResume: The updated resume.

    Notes:
        1. Unconditional: works whether the owner had zero, one, or several defaults,
           and whether this resume was already the default.
        2. Siblings are cleared and the target is set in one transaction.

    """
    resume.is_default = True
    _save(db, resume)

    _msg = f"Resume {resume.id} is now the default for user {resume.user_id}"
    log.info(_msg)
    return resume


def duplicate_resume(db: Session, resume: DatabaseResume) -> DatabaseResume:
    """Copy a resume into a new private, non-default resume.

    Args:
        db (Session): The database session.
        resume (DatabaseResume): The resume to copy, already scoped to its owner.

    Returns:
        DatabaseResume: The new resume, titled "<title> (Copy)".

    Notes:
        1. Every field is copied except id, timestamps, and the public slug.
        2. Sections are deep copied so the two resumes never share documents.
        3. The copy is neither default nor public.

    """
    resume_data = ResumeData(
        user_id=resume.user_id,
        title=f"{resume.title} (Copy)",
        personal_info=copy.deepcopy(resume.personal_info),
        is_default=False,
        is_public=False,
        **{name: copy.deepcopy(getattr(resume, name)) for name in SECTION_FIELDS},
    )
    duplicate = DatabaseResume(data=resume_data)
    db.add(duplicate)
    _save(db, duplicate)

    _msg = f"Duplicated resume {resume.id} into {duplicate.id}"
    log.info(_msg)
    return duplicate


def toggle_public_resume(db: Session, resume: DatabaseResume) -> DatabaseResume:
    """Flip a resume between public and private.

    Args:
        db (Session): The database session.
        resume (DatabaseResume): The resume to toggle, already scoped to its owner.

    Returns:
        DatabaseResume: The updated resume.

    Notes:
        1. Going private clears the slug, so the old slug stops resolving.
        2. Going public assigns a slug, possibly a different one than before.

    """
    resume.is_public = not resume.is_public
    _save(db, resume)

    _msg = f"Resume {resume.id} is now {resume.visibility.value}"
    log.info(_msg)
    return resume


def get_public_resume_by_slug(db: Session, slug: str) -> DatabaseResume:
    """Retrieve a published resume by its public slug.

    Args:
        db (Session): The database session.
        slug (str): The public slug from the URL.

    Returns:
        DatabaseResume: The public resume holding this slug.

    Raises:
        HTTPException: 404 "Public resume not found" if no public resume holds the slug.

    """
    resume = (
        db.query(DatabaseResume)
        .filter(
            DatabaseResume.public_slug == slug,
            DatabaseResume.is_public.is_(True),
        )
        .first()
    )
    if not resume:
        _msg = f"No public resume for slug '{slug}'"
        log.debug(_msg)
        raise HTTPException(status_code=404, detail="Public resume not found")
    return resume
