from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment with defaults.

    Environment variable mapping follows pydantic's rules (e.g., APP_NAME, DEBUG,
    DATA_DIR, DB_FILENAME, SEED_EXCHANGE_RATE, ORDERS_MAX_LIMIT).
    """

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Basic app metadata
    app_name: str = "VAIexpress Ledger"
    debug: bool = False
    version: str = "0.1.0"

    # Data & persistence
    data_dir: Path = Path("data")
    db_filename: str = "ledger.sqlite3"
    db_path: Optional[Path] = None  # derived if not provided

    # THB->LAK base rate written to the settings row on first start only.
    seed_exchange_rate: Optional[float] = None

    # Order listing
    orders_default_limit: int = 50
    orders_max_limit: int = 200

    cors_allow_origins: List[str] = ["*"]

    def init_post_load(self) -> None:
        """Finalize derived fields and ensure directories exist."""
        if self.db_path is None:
            self.db_path = self.data_dir / self.db_filename
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        if self.seed_exchange_rate is not None and self.seed_exchange_rate <= 0:
            raise ValueError(
                f"seed_exchange_rate must be positive, got {self.seed_exchange_rate}"
            )
        if not (1 <= self.orders_default_limit <= self.orders_max_limit):
            raise ValueError(
                "orders_default_limit must be between 1 and orders_max_limit"
            )


@lru_cache
def get_settings() -> Settings:
    settings = Settings()
    settings.init_post_load()
    return settings
