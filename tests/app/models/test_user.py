import pytest

from resume_builder.app.models.user import User, UserData


def _user_data(**overrides):
    values = {
        "first_name": "Jane",
        "last_name": "Doe",
        "email": "jane@example.com",
        "hashed_password": "hashed",
    }
    values.update(overrides)
    return UserData(**values)


def test_user_init():
    user = User(data=_user_data(first_name="  Jane ", email=" Jane@Example.COM "))

    assert user.first_name == "Jane"
    assert user.last_name == "Doe"
    assert user.email == "jane@example.com"
    assert user.hashed_password == "hashed"
    assert user.is_active is True
    assert user.id is None


def test_user_init_with_id():
    user = User(data=_user_data(id_=7))

    assert user.id == 7


@pytest.mark.parametrize(
    "field, value, message",
    [
        ("first_name", "", "first_name cannot be empty"),
        ("last_name", "   ", "last_name cannot be empty"),
        ("first_name", 3, "first_name must be a string"),
        ("email", "", "Email cannot be empty"),
        ("email", None, "Email must be a string"),
        ("hashed_password", " ", "Hashed password cannot be empty"),
        ("hashed_password", b"bytes", "Hashed password must be a string"),
        ("is_active", "yes", "is_active must be a boolean"),
    ],
)
def test_user_validation(field, value, message):
    with pytest.raises(ValueError, match=message):
        User(data=_user_data(**{field: value}))


def test_user_persists_with_defaults(db):
    user = User(data=_user_data())
    db.add(user)
    db.commit()
    db.refresh(user)

    assert user.id is not None
    assert user.created_at is not None
    assert user.resumes == []
