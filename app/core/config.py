"""
Конфигурация приложения из переменных окружения.

Один класс Settings (pydantic-settings), все настройки читаются из .env.
В коде используем только settings.*, не os.getenv.
MONGO_URI обязателен: без него приложение падает при старте.
"""
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Настройки из env."""

    # MongoDB — строка подключения обязательна
    MONGO_URI: str
    MONGO_DB_NAME: str = "catalog"

    # CORS: список origin через запятую в .env
    CORS_ORIGINS: str = "http://localhost:3000,http://127.0.0.1:3000"

    # Логирование
    LOG_LEVEL: str = "INFO"

    # Базовый URL Collection API для клиентов страниц (views)
    API_BASE_URL: str = "http://localhost:8000"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("MONGO_URI")
    @classmethod
    def _mongo_uri_not_empty(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("MONGO_URI not defined")
        return value

    def cors_list(self) -> list[str]:
        """CORS origins как список для CORSMiddleware."""
        return [x.strip() for x in self.CORS_ORIGINS.split(",") if x.strip()]


# Глобальный экземпляр — импортируй: from app.core.config import settings
settings = Settings()
