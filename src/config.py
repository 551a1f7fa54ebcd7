from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    API_PORT: int = 8000
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"

    # Бот опционален: без токена поднимается только HTTP API
    BOT_TOKEN: str | None = None
    JWT_SECRET: str | None = None

    # Если DATABASE_URL не задан, собираем его из POSTGRES_*
    DATABASE_URL: str | None = None
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "postgres"
    POSTGRES_DB: str = "interview_prep"
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432

    # Отдаются в /api/health как есть, дефолты подставляет роутер
    CORS_ORIGIN: str | None = None
    MAX_FILE_SIZE: str | None = None
    RATE_LIMIT_WINDOW_MS: str | None = None
    RATE_LIMIT_MAX_REQUESTS: str | None = None

    CATALOG_ALLOW_DUPLICATE_IDS: bool = False

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        # Важно: драйвер postgresql+asyncpg для асинхронной работы
        return (
            f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@"
            f"{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )

settings = Settings()
