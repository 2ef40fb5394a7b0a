# booklist/core/config/settings.py

from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path
from booklist.core.enums.rating_comparison import RatingComparison

class Settings(BaseSettings):
    """
    Application settings loaded from environment variables or .env file.
    Includes general app settings and the sort engine switches.
    """
    # General App Settings
    APP_NAME: str = "Book List Sorter"
    APP_VERSION: str = "0.1.0"

    # Logging Settings
    LOG_LEVEL: str = "INFO" # e.g., DEBUG, INFO, WARNING, ERROR, CRITICAL

    # Sorting Settings
    RATING_COMPARISON: RatingComparison = RatingComparison.TEXT
    LAST_DIRECTIVE_DOMINATES: bool = True # False makes the first toggled attribute the primary key

    # Pydantic-settings configuration
    model_config = SettingsConfigDict(
        env_file=str(Path(__file__).parent.parent.parent.parent / ".env"),
        env_file_encoding='utf-8',
        case_sensitive=False, # Allows env vars like LOG_LEVEL or log_level
        extra='ignore' # Ignore extra environment variables not defined in the model
    )

settings = Settings()
