from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "sqlite:///./rayzum.db"
    secret_key: str = "replace-with-a-long-random-secret-key"
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24 * 7  # 7 days
    app_env: str = "development"  # development, staging, production

    # "sql" uses DATABASE_URL; "local" keeps one JSON document per owner in LOCAL_STORE_PATH
    storage_backend: str = "sql"
    local_store_path: str = "./data/rayzum.json"

    # Requests without a bearer token act on this owner's data.
    # Set ALLOW_DEFAULT_OWNER=false to require a token on every request.
    default_owner_id: str = "demo-user"
    allow_default_owner: bool = True

    # CORS origins as comma-separated values
    cors_allow_origins: str = "http://localhost:3000"

    log_level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR
    log_file: str | None = None  # also write logs here when set

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
