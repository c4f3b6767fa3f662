import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from resume_builder.app.api.routes.route_logic.resume_crud import (
    get_public_resume_by_slug,
)
from resume_builder.app.api.routes.route_logic.resume_serialization import (
    serialize_resume,
)
from resume_builder.app.api.routes.route_models import ResumeDetailResponse
from resume_builder.app.database.database import get_db

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api/public", tags=["public"])


@router.get("/resume/{slug}")
def get_public_resume(
    slug: str,
    db: Annotated[Session, Depends(get_db)],
) -> ResumeDetailResponse:
    """
    Read a published resume without authentication.

    Args:
        slug (str): The resume's public slug.
        db (Session): The database session dependency.

    Returns:
        ResumeDetailResponse: The resume, without the userId field.

    Raises:
        HTTPException: 404 if no public resume holds the slug, including a resume
            that has since been made private.

    """
    resume = get_public_resume_by_slug(db, slug)
    return ResumeDetailResponse(resume=serialize_resume(resume, include_owner=False))
