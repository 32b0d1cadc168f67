from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "Todo API"
    DATABASE_URL: str = "sqlite+aiosqlite:///./todo.db"
    DATABASE_ECHO: bool = False
    # Explicit startup flag; the store never guesses from the environment name.
    SEED_DEMO_DATA: bool = False
    LOG_LEVEL: str = "INFO"
    LOG_DIR: Optional[str] = None
    API_HOST: str = "127.0.0.1"
    API_PORT: int = 8000
    CORS_ORIGINS: List[str] = ["*"]
    DEFAULT_PAGE_SIZE: int = 10

    class Config:
        env_file = ".env"
        extra = "ignore"

settings = Settings()
