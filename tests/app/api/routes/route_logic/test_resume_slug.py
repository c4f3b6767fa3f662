import logging
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import IntegrityError

from resume_builder.app.api.routes.route_logic import resume_slug
from resume_builder.app.api.routes.route_logic.resume_crud import create_resume
from resume_builder.app.api.routes.route_logic.resume_slug import (
    build_base_slug,
    find_available_slug,
)
from resume_builder.app.models.resume import ResumeDocument
from resume_builder.app.models.resume_model import Resume as DatabaseResume

log = logging.getLogger(__name__)


@pytest.fixture
def public_document(resume_payload):
    def _public_document(**overrides):
        return ResumeDocument.model_validate(resume_payload(isPublic=True, **overrides))

    return _public_document


@pytest.mark.parametrize(
    "first_name, last_name, expected",
    [
        ("Jane", "Doe", "jane-doe"),
        ("MARY ANN", "Smith", "mary-ann-smith"),
        ("  José ", "O'Brien", "jos-o-brien"),
        ("Jean--Luc", "Picard!", "jean-luc-picard"),
        ("R2", "D2", "r2-d2"),
        ("", "Doe", "doe"),
        ("Jane", None, "jane"),
        ("", "", "resume"),
        (None, None, "resume"),
        ("李", "王", "resume"),
    ],
)
def test_build_base_slug(first_name, last_name, expected):
    assert build_base_slug(first_name, last_name) == expected


def test_find_available_slug_unused(db):
    assert find_available_slug(db, "jane-doe") == "jane-doe"


def test_find_available_slug_picks_first_free_suffix(db, make_user, public_document):
    users = [make_user() for _ in range(3)]
    for user in users:
        create_resume(db, user_id=user.id, document=public_document())

    slugs = sorted(r.public_slug for r in db.query(DatabaseResume).all())

    assert slugs == ["jane-doe", "jane-doe-1", "jane-doe-2"]
    assert find_available_slug(db, "jane-doe") == "jane-doe-3"


def test_find_available_slug_ignores_own_slug(db, make_user, public_document):
    user = make_user()
    resume = create_resume(db, user_id=user.id, document=public_document())

    assert find_available_slug(db, "jane-doe", exclude_id=resume.id) == "jane-doe"


def test_assign_public_slug_uses_fallback_for_unusable_names(db, make_user, resume_payload):
    user = make_user()
    document = ResumeDocument.model_validate(
        resume_payload(first_name="!!!", last_name="???", isPublic=True),
    )

    resume = create_resume(db, user_id=user.id, document=document)

    assert resume.public_slug == "resume"


def test_assign_public_slug_retries_after_losing_race(
    db,
    make_user,
    public_document,
    monkeypatch,
    caplog,
):
    first_jane = make_user()
    second_jane = make_user()
    create_resume(db, user_id=first_jane.id, document=public_document())

    real_slug_in_use = resume_slug._slug_in_use
    calls = {"n": 0}

    def stale_slug_in_use(db, slug, exclude_id):
        # The first lookup misses the existing row, as if it had been
        # committed by another writer right after the check.
        calls["n"] += 1
        if calls["n"] == 1:
            return False
        return real_slug_in_use(db, slug, exclude_id)

    monkeypatch.setattr(resume_slug, "_slug_in_use", stale_slug_in_use)

    with caplog.at_level(logging.WARNING):
        second = create_resume(db, user_id=second_jane.id, document=public_document())

    assert second.public_slug == "jane-doe-1"
    assert second.is_public is True
    assert "taken concurrently (attempt 1/5)" in caplog.text
    assert db.query(DatabaseResume).count() == 2


def test_assign_public_slug_gives_up_after_max_attempts(
    db,
    make_user,
    public_document,
    monkeypatch,
):
    first_jane = make_user()
    second_jane = make_user()
    create_resume(db, user_id=first_jane.id, document=public_document())

    monkeypatch.setattr(
        resume_slug,
        "get_settings",
        lambda: MagicMock(slug_max_attempts=2),
    )
    monkeypatch.setattr(resume_slug, "_slug_in_use", lambda db, slug, exclude_id: False)

    with pytest.raises(IntegrityError):
        create_resume(db, user_id=second_jane.id, document=public_document())

    db.rollback()
    assert db.query(DatabaseResume).count() == 1
