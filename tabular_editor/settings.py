"""Editor settings, read from TABULAR_EDITOR_* environment variables or `.env`."""
import tempfile

from pydantic_settings import BaseSettings, SettingsConfigDict


class EditorSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TABULAR_EDITOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )

    # === LOGGING ===
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s | %(levelname)-8s | %(name)s - %(message)s"

    # === FILES ===
    EXPORT_DIR: str = tempfile.gettempdir()  # where saved/exported downloads are written
    NEW_FILE_COLUMNS: int = 3

    # === COLUMN TYPES ===
    TYPE_SAMPLE_SIZE: int = 100
    TYPE_THRESHOLD: float = 0.9

    # === UI ===
    SERVER_NAME: str = "127.0.0.1"
    SERVER_PORT: int = 7860


settings = EditorSettings()
