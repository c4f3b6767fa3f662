from datetime import UTC, datetime, timedelta

from jose import jwt

from resume_builder.app.core.config import Settings
from resume_builder.app.core.security import (
    authenticate_user,
    create_access_token,
    get_password_hash,
    verify_password,
)


def _settings():
    return Settings(_env_file=None, SECRET_KEY="unit-test-secret", ALGORITHM="HS256")


def test_password_hash_round_trip():
    hashed = get_password_hash("correct horse")

    assert hashed != "correct horse"
    assert verify_password("correct horse", hashed)
    assert not verify_password("battery staple", hashed)


def test_password_hash_is_salted():
    assert get_password_hash("same") != get_password_hash("same")


def test_create_access_token_default_expiry():
    settings = _settings()
    before = datetime.now(UTC)

    token = create_access_token({"sub": "42"}, settings)

    claims = jwt.decode(token, "unit-test-secret", algorithms=["HS256"])
    assert claims["sub"] == "42"
    expires = datetime.fromtimestamp(claims["exp"], UTC)
    expected = before + timedelta(minutes=settings.access_token_expire_minutes)
    assert abs((expires - expected).total_seconds()) < 5


def test_create_access_token_custom_expiry():
    token = create_access_token(
        {"sub": "42"},
        _settings(),
        expires_delta=timedelta(minutes=5),
    )

    claims = jwt.decode(token, "unit-test-secret", algorithms=["HS256"])
    expires = datetime.fromtimestamp(claims["exp"], UTC)
    assert expires - datetime.now(UTC) <= timedelta(minutes=5)


def test_create_access_token_does_not_modify_claims():
    data = {"sub": "42"}

    create_access_token(data, _settings())

    assert data == {"sub": "42"}


def test_authenticate_user(db, make_user):
    user = make_user(email="jane@example.com", password="letmein")

    result = authenticate_user(db, "  JANE@example.com", "letmein")

    assert result is not None
    assert result.id == user.id


def test_authenticate_user_wrong_password(db, make_user):
    make_user(email="jane@example.com", password="letmein")

    assert authenticate_user(db, "jane@example.com", "nope") is None


def test_authenticate_user_unknown_email(db):
    assert authenticate_user(db, "ghost@example.com", "letmein") is None


def test_authenticate_user_inactive(db, make_user):
    user = make_user(email="jane@example.com", password="letmein")
    db.get(type(user), user.id).is_active = False
    db.commit()

    assert authenticate_user(db, "jane@example.com", "letmein") is None
