"""Configuration defaults for building resource names.

Settings are loaded from environment variables with .env file support via
pydantic-settings. They only provide defaults: every value read here is
validated by the same rules as any other input before it becomes part of a
name.

Environment variables:
    FIRESTORE_PROJECT_ID: Project used by DatabaseName.from_settings()
    FIRESTORE_DATABASE_ID: Database used by DatabaseName.from_settings()
        (defaults to "(default)")

Example:
    >>> from firestore_path import DatabaseName
    >>> DatabaseName.from_settings()  # with FIRESTORE_PROJECT_ID=my-project
    DatabaseName('projects/my-project/databases/(default)')

Note:
    Settings are loaded once at module import and frozen. The process must be
    restarted to pick up changes to environment variables or the .env file.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DATABASE_ID = "(default)"


class Settings(BaseSettings):
    """Environment-driven defaults for firestore-path.

    Attributes:
        firestore_project_id: Project id for the default database name. Empty
            when not configured.
        firestore_database_id: Database id for the default database name.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    firestore_project_id: str = ""
    firestore_database_id: str = DEFAULT_DATABASE_ID


settings = Settings()
"""Process-wide settings instance."""
