import logging

from fastapi import Depends
from sqlalchemy.orm import Session

from resume_builder.app.api.routes.route_logic.resume_crud import (
    get_resume_by_id_and_user,
)
from resume_builder.app.core.auth import get_current_user
from resume_builder.app.database.database import get_db
from resume_builder.app.models.resume_model import Resume as DatabaseResume
from resume_builder.app.models.user import User

log = logging.getLogger(__name__)


def get_resume_for_user(
    resume_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> DatabaseResume:
    """
    Dependency to get a specific resume for the current user.

    Args:
        resume_id (int): The unique identifier of the resume to retrieve.
        db (Session): The database session dependency.
        current_user (User): The current authenticated user.

    Returns:
        DatabaseResume: The resume object if found and owned by the user.

    Raises:
        HTTPException: 404 if the resume does not exist or belongs to someone else.

    """
    return get_resume_by_id_and_user(db, resume_id=resume_id, user_id=current_user.id)
