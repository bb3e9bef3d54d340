import logging
from dataclasses import dataclass
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from resume_vault.app.models import Base

log = logging.getLogger(__name__)


@dataclass
class ResumeData:
    """Dataclass to hold data for Resume initialization."""

    user_id: int
    title: str
    description: str | None = None


class Resume(Base):
    """Resume model, the root of a resume aggregate.

    The pair (title, user_id) is meant to be unique per owner. Nothing at the
    storage level enforces it; creation renames a clashing title before insert.

    Attributes:
        id (int): Unique identifier for the resume.
        user_id (int): Foreign key to the User who owns the resume.
        title (str): Title of the resume.
        description (str | None): Optional free-form description.
        inserted_at (datetime): Timestamp when the resume was created.
        updated_at (datetime): Timestamp when the resume was last updated.
        personal_info (PersonalInfo | None): The single personal info record.
        experiences (list[Experience]): Work experience entries.
        education (list[Education]): Education entries.
        skills (list[Skill]): Skills, ordered by their index.
        languages (list[Language]): Spoken languages with their levels.
        additional_skills (list[AdditionalSkill]): Other rated skills.

    """

    __tablename__ = "resumes"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    inserted_at = Column(
        DateTime,
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    updated_at = Column(
        DateTime,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    user = relationship("User", back_populates="resumes")

    personal_info = relationship(
        "PersonalInfo",
        back_populates="resume",
        cascade="all, delete-orphan",
        uselist=False,
    )
    experiences = relationship(
        "Experience",
        back_populates="resume",
        cascade="all, delete-orphan",
        order_by="Experience.id",
    )
    education = relationship(
        "Education",
        back_populates="resume",
        cascade="all, delete-orphan",
        order_by="Education.id",
    )
    skills = relationship(
        "Skill",
        back_populates="resume",
        cascade="all, delete-orphan",
        order_by="Skill.index",
    )
    languages = relationship(
        "Language",
        back_populates="resume",
        cascade="all, delete-orphan",
        order_by="Language.id",
    )
    additional_skills = relationship(
        "AdditionalSkill",
        back_populates="resume",
        cascade="all, delete-orphan",
        order_by="AdditionalSkill.id",
    )

    def __init__(self, data: ResumeData):
        """Initialize a Resume instance.

        Args:
            data (ResumeData): An object containing the data for the new resume.

        Returns:
            None

        Notes:
            1. Assigns attributes from the `data` object to the `Resume` instance.
            2. This constructor does not perform validation; drafts are validated beforehand.
            3. This function does not perform disk, network, or database access.

        """
        _msg = f"Initializing Resume with title: {data.title}"
        log.debug(_msg)

        self.user_id = data.user_id
        self.title = data.title
        self.description = data.description
