import logging

import pytest

from resume_vault.app.models.user import User

log = logging.getLogger(__name__)


def test_user_init_strips_values():
    user = User(username="  alice ", email=" alice@example.com ", id=3)

    assert user.id == 3
    assert user.username == "alice"
    assert user.email == "alice@example.com"


@pytest.mark.parametrize(
    "username, email, message",
    [
        ("", "a@example.com", "Username cannot be empty"),
        (123, "a@example.com", "Username must be a string"),
        ("alice", "   ", "Email cannot be empty"),
        ("alice", None, "Email must be a string"),
    ],
)
def test_user_invalid_values(username, email, message):
    with pytest.raises(ValueError, match=message):
        User(username=username, email=email)
