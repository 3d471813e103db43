from functools import lru_cache

from pydantic_settings import BaseSettings

from declension.languages.types import NameGroupPolicy


class Settings(BaseSettings):
    # Backend
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    APP_DEBUG: bool = True

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False  # True for production (structured JSON), False for dev (colored)

    # Inflection
    STRICT_CASES: bool = False  # Russian engine raises on unknown cases instead of returning the bare stem
    DEFAULT_POLICY: NameGroupPolicy = NameGroupPolicy.AUTO

    @property
    def is_production(self) -> bool:
        return not self.APP_DEBUG

    class Config:
        env_file = ".env"
        env_prefix = "DECLENSION_"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()
