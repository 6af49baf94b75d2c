from datetime import datetime, timezone

import pytest

from cleanapi.entity import User, user_from_dict


@pytest.mark.parametrize(
    ("email", "valid"),
    [
        ("test@example.com", True),
        ("jane.doe+news@example.com", True),
        ("invalid-email", False),
        ("@missinguser.com", False),
    ],
)
def test_user_is_valid_email(email, valid):
    assert User(email=email).is_valid_email() is valid


def test_to_dict_keys_and_zero_time():
    user = User(id="1", name="Jon", email="jon@example.com")
    assert user.to_dict() == {
        "ID": "1",
        "Name": "Jon",
        "Email": "jon@example.com",
        "CreatedAt": "0001-01-01T00:00:00Z",
    }


def test_round_trip():
    created = datetime(2024, 5, 6, 7, 8, 9, 123456, tzinfo=timezone.utc)
    user = User(id="abc", name="Ana", email="ana@example.com", created_at=created)
    assert user_from_dict(user.to_dict()) == user


def test_from_dict_missing_fields_use_defaults():
    user = user_from_dict({"ID": "7"})
    assert user == User(id="7")


def test_from_dict_accepts_nanosecond_timestamps():
    user = user_from_dict({"CreatedAt": "2024-01-02T03:04:05.123456789Z"})
    assert user.created_at == datetime(2024, 1, 2, 3, 4, 5, 123456, tzinfo=timezone.utc)


def test_from_dict_rejects_non_object():
    with pytest.raises(ValueError):
        user_from_dict("notjson")


def test_from_dict_rejects_wrong_type():
    with pytest.raises(ValueError):
        user_from_dict({"ID": 5})