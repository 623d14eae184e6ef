from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore'
    )

    APP_NAME: str = "FeedbackHub"
    APP_ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    SECRET_KEY: str = "change_me_please"
    # Tokens live for a week
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 7

    # SQLite connection string (read from .env)
    DATABASE_URL: str = "sqlite:///./feedback_hub.db"

    BACKEND_CORS_ORIGINS: str = "http://localhost:3000"

    PUBLIC_SURVEY_LIMIT: int = 50

    # Optional first admin, created at startup if both are set
    ADMIN_EMAIL: str | None = None
    ADMIN_PASSWORD: str | None = None

settings = Settings()
