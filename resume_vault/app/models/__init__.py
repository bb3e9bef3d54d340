import logging

from sqlalchemy.orm import declarative_base

log = logging.getLogger(__name__)

# Base model that other models will inherit from
Base = declarative_base()

# Import all models here to ensure they are registered with SQLAlchemy's metadata
from .education_model import Education  # noqa
from .experience_model import Experience  # noqa
from .personal_info_model import PersonalInfo  # noqa
from .rated_model import AdditionalSkill, Language  # noqa
from .resume_model import Resume  # noqa
from .skill_model import Skill  # noqa
from .user import User  # noqa
