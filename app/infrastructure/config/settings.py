"""Application settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration settings."""

    debug_mode: bool = False
    repository_backend: str = "in_memory"  # in_memory or postgres
    database_url: str = ""  # Required when repository_backend=postgres
    session_ttl_seconds: int = 604800  # 7 days default
    min_password_length: int = 6
    password_hash_method: str = "scrypt"
    whatsapp_base_url: str = "https://wa.me"
    phone_country_code: str = "62"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",
    )


settings = Settings()
