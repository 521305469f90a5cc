# mercado_gaucho/core/config.py

from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Настройки базы данных
    DATABASE_USER: str
    DATABASE_PASSWORD: str
    DATABASE_HOST: str = "localhost"
    DATABASE_PORT: int = 5432
    DATABASE_NAME: str
    # Полный URL SQLAlchemy, если нужен не PostgreSQL (например, sqlite для локальной разработки)
    DATABASE_URL_OVERRIDE: Optional[str] = None

    # Сервер
    API_PORT: int = 3001
    ENVIRONMENT: str = "production"
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS_STR: str = "*"

    # Контроль доступа и лимиты
    ENFORCE_ACCESS_POLICIES: bool = False
    RATE_LIMIT_STORAGE_URI: str = "memory://"
    TOKEN_VALIDATION_RATE_LIMIT: str = "30/minute"

    # Бизнес-правила
    ENFORCE_ORDER_TRANSITIONS: bool = True

    @property
    def CORS_ORIGINS(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS_STR.split(',') if origin.strip()]

    @property
    def IS_PRODUCTION(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"

    @property
    def DATABASE_URL(self) -> str:
        if self.DATABASE_URL_OVERRIDE:
            return self.DATABASE_URL_OVERRIDE
        return f"postgresql+psycopg2://{self.DATABASE_USER}:{self.DATABASE_PASSWORD}@{self.DATABASE_HOST}:{self.DATABASE_PORT}/{self.DATABASE_NAME}"

    model_config = SettingsConfigDict(env_file=".env")

settings = Settings()
