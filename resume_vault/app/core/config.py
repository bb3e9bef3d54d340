import logging
from functools import lru_cache

from pydantic import Field, PostgresDsn, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

log = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        database_url (PostgresDsn): Database connection URL for PostgreSQL,
            assembled from the DB_* components.
        database_url_override (str | None): A full SQLAlchemy URL that replaces the
            assembled PostgreSQL URL when set (for example a SQLite URL).
        sql_echo (bool): Whether the engine should echo emitted SQL.

    """

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="allow",
    )

    # Database settings
    db_host: str = Field(default="localhost", validation_alias="DB_HOST")
    db_port: int = Field(default=5432, validation_alias="DB_PORT")
    db_name: str = Field(default="resume_vault", validation_alias="DB_NAME")
    db_user: str = Field(default="postgres", validation_alias="DB_USER")
    db_password: str = Field(default="", validation_alias="DB_PASSWORD")
    database_url_override: str | None = Field(
        default=None,
        validation_alias="DATABASE_URL",
    )
    sql_echo: bool = Field(default=False, validation_alias="SQL_ECHO")

    @computed_field
    @property
    def database_url(self) -> PostgresDsn:
        """
        Assembled database URL from components.

        Returns:
            PostgresDsn: The fully assembled PostgreSQL connection URL.

        Notes:
            1. The scheme is set to "postgresql".
            2. The username, password, host, port, and database name are taken from the instance attributes.

        """
        return PostgresDsn.build(
            scheme="postgresql",
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            path=self.db_name,
        )

    @property
    def sqlalchemy_url(self) -> str:
        """The URL handed to SQLAlchemy, preferring DATABASE_URL when set."""
        if self.database_url_override:
            return self.database_url_override
        return str(self.database_url)


@lru_cache
def get_settings() -> Settings:
    """
    Get the global settings instance.

    Args:
        None

    Returns:
        Settings: The cached settings instance.

    Raises:
        ValidationError: If environment variables are present but invalid.

    Notes:
        1. Reads configuration from environment variables and the .env file.
        2. Missing values fall back to defaults.
        3. The instance is cached so the .env file is only parsed once.
        4. This function performs disk access to read the .env file.

    """
    return Settings()
