from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

DATA_DIR = Path(__file__).parent.parent / "data"


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="YGODB_")

    app_name: str = "ygodb"
    debug: bool = False

    data_dir: Path = DATA_DIR
    card_database_path: Path = DATA_DIR / "cards.json"
    limit_regulation_path: Path = DATA_DIR / "limit_regulation.json"

    log_level: str = "INFO"


settings = Settings()


# =============================================================================
# DOMAIN LIMITS
# =============================================================================

# Copies of one card allowed in a deck when it is not regulated
MAX_DECK_COPIES = 3

# Level, rank and pendulum scales are stored as unsigned bytes
MAX_STAT_BYTE = 255
