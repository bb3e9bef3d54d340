import logging

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship, validates

from resume_vault.app.models import Base

log = logging.getLogger(__name__)


class User(Base):
    """
    User model for resume ownership.

    Attributes:
        id (int): Unique identifier for the user.
        username (str): Unique username for the user.
        email (str): Unique email address for the user.
        resumes (list[Resume]): Resumes owned by the user.

    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, index=True, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)

    resumes = relationship(
        "Resume",
        back_populates="user",
        cascade="all, delete-orphan",
    )

    def __init__(self, username: str, email: str, id: int | None = None):
        """
        Initialize a User instance.

        Args:
            username (str): Unique username for the user. Must be a non-empty string.
            email (str): Unique email address for the user. Must be a non-empty string.
            id (int | None): The unique identifier of the user, for testing purposes.

        Returns:
            None

        Notes:
            1. Assign all values to instance attributes; the validators strip them.
            2. This operation does not involve network, disk, or database access.

        """
        _msg = f"Initializing User with username: {username}"
        log.debug(_msg)

        if id is not None:
            self.id = id
        self.username = username
        self.email = email

    @validates("username")
    def validate_username(self, key, username):
        """
        Validate the username field.

        Args:
            key (str): The field name being validated (should be 'username').
            username (str): The username value to validate. Must be a non-empty string.

        Returns:
            str: The validated username (stripped of leading/trailing whitespace).

        """
        if not isinstance(username, str):
            raise ValueError("Username must be a string")
        if not username.strip():
            raise ValueError("Username cannot be empty")
        return username.strip()

    @validates("email")
    def validate_email(self, key, email):
        """
        Validate the email field.

        Args:
            key (str): The field name being validated (should be 'email').
            email (str): The email value to validate. Must be a non-empty string.

        Returns:
            str: The validated email (stripped of leading/trailing whitespace).

        """
        if not isinstance(email, str):
            raise ValueError("Email must be a string")
        if not email.strip():
            raise ValueError("Email cannot be empty")
        return email.strip()
