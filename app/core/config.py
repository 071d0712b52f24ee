from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment with defaults.

    Environment variable mapping follows pydantic's rules (e.g., APP_NAME, DEBUG, VERSION, API_TOKEN).
    """

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Basic app metadata
    app_name: str = "Currency Rates Service"
    debug: bool = False
    version: str = "0.1.0"

    # Bearer token guarding PUT/DELETE on /rate; unset means every write is refused
    api_token: Optional[str] = None

    def init_post_load(self) -> None:
        """Finalize derived fields."""
        if self.api_token is not None:
            self.api_token = self.api_token.strip() or None


@lru_cache
def get_settings() -> Settings:
    settings = Settings()
    settings.init_post_load()
    return settings
