import logging
from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import Session

from resume_builder.app.api.dependencies import get_resume_for_user
from resume_builder.app.api.routes.route_logic import resume_crud
from resume_builder.app.api.routes.route_logic.resume_serialization import (
    serialize_resume,
)
from resume_builder.app.api.routes.route_logic.resume_validation import (
    validate_resume_create,
    validate_resume_update,
)
from resume_builder.app.api.routes.route_models import (
    MessageResponse,
    ResumeActionResponse,
    ResumeDetailResponse,
    ResumeListResponse,
    ValidationErrorResponse,
)
from resume_builder.app.core.auth import get_current_user
from resume_builder.app.database.database import get_db
from resume_builder.app.models.resume_model import Resume as DatabaseResume
from resume_builder.app.models.user import User

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api/resume", tags=["resumes"])

_VALIDATION_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": ValidationErrorResponse},
}


@router.get("")
def list_resumes(
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> ResumeListResponse:
    """
    List all resumes of the current user, most recently updated first.

    Args:
        db (Session): The database session dependency.
        current_user (User): The current authenticated user.

    Returns:
        ResumeListResponse: The resumes (without userId) and their count.

    """
    resumes = resume_crud.get_user_resumes(db, current_user.id)
    return ResumeListResponse(
        resumes=[serialize_resume(r, include_owner=False) for r in resumes],
        count=len(resumes),
    )


@router.get("/{resume_id}")
def get_resume(
    resume: Annotated[DatabaseResume, Depends(get_resume_for_user)],
) -> ResumeDetailResponse:
    """
    Retrieve one resume of the current user.

    Raises:
        HTTPException: 404 if the resume is not found or belongs to another user.

    """
    return ResumeDetailResponse(resume=serialize_resume(resume))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    responses=_VALIDATION_RESPONSES,
)
def create_resume(
    payload: Annotated[Any, Body()],
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> ResumeActionResponse:
    """
    Create a resume owned by the current user.

    Args:
        payload (Any): The resume document. Validated here rather than by FastAPI
            so every failing field is reported in one 400 response.
        db (Session): The database session dependency.
        current_user (User): The current authenticated user.

    Returns:
        ResumeActionResponse: A success message and the created resume.

    Raises:
        ResumeValidationError: Rendered as 400 with one entry per failing field.

    Notes:
        1. Validate title, personal info, and every section entry.
        2. Create the resume; the default flag and public slug are settled in the
           same transaction.

    """
    document = validate_resume_create(payload)
    resume = resume_crud.create_resume(db, user_id=current_user.id, document=document)
    return ResumeActionResponse(
        message="Resume created successfully",
        resume=serialize_resume(resume),
    )


@router.put("/{resume_id}", responses=_VALIDATION_RESPONSES)
def update_resume(
    payload: Annotated[Any, Body()],
    db: Annotated[Session, Depends(get_db)],
    resume: Annotated[DatabaseResume, Depends(get_resume_for_user)],
) -> ResumeActionResponse:
    """
    Merge a partial update into a resume of the current user.

    Notes:
        1. The resume is looked up first, so an unknown id is a 404 even when the
           payload is invalid.
        2. Only keys present in the payload are validated and applied.

    """
    changes = validate_resume_update(payload)
    updated = resume_crud.update_resume(db, resume=resume, changes=changes)
    return ResumeActionResponse(
        message="Resume updated successfully",
        resume=serialize_resume(updated),
    )


@router.delete("/{resume_id}")
def delete_resume(
    db: Annotated[Session, Depends(get_db)],
    resume: Annotated[DatabaseResume, Depends(get_resume_for_user)],
) -> MessageResponse:
    """Delete a resume of the current user. A second delete is a 404."""
    resume_crud.delete_resume(db, resume)
    return MessageResponse(message="Resume deleted successfully")


@router.put("/{resume_id}/set-default")
def set_default_resume(
    db: Annotated[Session, Depends(get_db)],
    resume: Annotated[DatabaseResume, Depends(get_resume_for_user)],
) -> ResumeActionResponse:
    """Make a resume the current user's only default resume."""
    updated = resume_crud.set_default_resume(db, resume)
    return ResumeActionResponse(
        message="Default resume updated successfully",
        resume=serialize_resume(updated),
    )


@router.post("/{resume_id}/duplicate", status_code=status.HTTP_201_CREATED)
def duplicate_resume(
    db: Annotated[Session, Depends(get_db)],
    resume: Annotated[DatabaseResume, Depends(get_resume_for_user)],
) -> ResumeActionResponse:
    """Copy a resume of the current user into a new private, non-default resume."""
    duplicate = resume_crud.duplicate_resume(db, resume)
    return ResumeActionResponse(
        message="Resume duplicated successfully",
        resume=serialize_resume(duplicate),
    )


@router.put("/{resume_id}/toggle-public")
def toggle_public_resume(
    db: Annotated[Session, Depends(get_db)],
    resume: Annotated[DatabaseResume, Depends(get_resume_for_user)],
) -> ResumeActionResponse:
    """
    Publish or unpublish a resume of the current user.

    Notes:
        1. Publishing assigns a unique slug when the resume has none.
        2. Unpublishing clears the slug.

    """
    updated = resume_crud.toggle_public_resume(db, resume)
    state = "made public" if updated.is_public else "made private"
    return ResumeActionResponse(
        message=f"Resume {state} successfully",
        resume=serialize_resume(updated),
    )
