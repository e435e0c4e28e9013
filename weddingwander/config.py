from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_prefix": "WW_", "env_file": ".env", "env_file_encoding": "utf-8"}

    jwt_secret: str = Field(default="dev-only-secret-change-me-0123456789abcdef", min_length=32)
    jwt_expire_minutes: int = Field(default=1440)
    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=False)
    db_path: str = Field(default="weddingwander.db")
    cors_origins: str = Field(default="http://localhost:5173")

    # Ledger policy
    allow_reregistration: bool = Field(default=False)
    max_guests_per_registration: int = Field(default=10, ge=1)

    # Catalog
    search_debounce_seconds: float = Field(default=0.3, ge=0.0)
    featured_count: int = Field(default=3, ge=1)


settings = Settings()
