import logging

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    LEXICON_URL: str = "https://api.datamuse.com/words"
    LEXICON_RELATION: str = "rel_bga"
    LEXICON_MAX_RESULTS: int = 30
    LEXICON_TIMEOUT_SECONDS: float = 3.0
    CHAIN_MAX_ATTEMPTS: int = 20
    CANDIDATE_LIMIT: int = 15
    CHAIN_RANDOM_SEED: int | None = None
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: str = "http://localhost:5173,http://localhost:3000"
    HOST: str = "127.0.0.1"
    PORT: int = 3001

    @property
    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def log_level(self) -> int:
        value = self.LOG_LEVEL.strip()
        if value.isdigit():
            return int(value)
        level = logging.getLevelName(value.upper())
        return level if isinstance(level, int) else logging.INFO


settings = Settings()
