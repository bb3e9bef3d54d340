import logging

from sqlalchemy import Column, Date, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from resume_vault.app.models import Base

log = logging.getLogger(__name__)


class PersonalInfo(Base):
    """
    Personal details attached to a resume; at most one per resume.

    Attributes:
        id (int): Primary key.
        resume_id (int): Foreign key to the owning resume, unique.
        first_name (str): Given name.
        last_name (str): Family name.
        address (str | None): Postal address.
        email (str | None): Contact email.
        phone (str | None): Contact phone number.
        profession (str | None): Professional headline.
        date_of_birth (date | None): Date of birth.
        photo (str | None): Photo location.
        resume (Resume): Relationship to the owning resume.

    """

    __tablename__ = "personal_info"

    id = Column(Integer, primary_key=True, index=True)
    resume_id = Column(
        Integer,
        ForeignKey("resumes.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    address = Column(String, nullable=True)
    email = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    profession = Column(String, nullable=True)
    date_of_birth = Column(Date, nullable=True)
    photo = Column(String, nullable=True)

    resume = relationship("Resume", back_populates="personal_info")
