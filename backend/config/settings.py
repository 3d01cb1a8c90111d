from pydantic_settings import BaseSettings
from pydantic import AliasChoices, Field, field_validator
from functools import lru_cache


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Environment variables can come from:
    - docker-compose.yml environment section
    - .env file (for secrets like API keys)
    - System environment

    Every connection value is optional. Missing or placeholder values put the
    directory in demo mode (mock backend, bundled dossiers) instead of failing.
    """

    # Environment
    environment: str = "development"

    # Supabase (REST + storage)
    supabase_url: str = ""
    supabase_anon_key: str = ""
    dossier_table: str = "dossiers"
    image_bucket: str = "dossier-images"
    backend_timeout: float = 30.0

    # OpenAI (archive summaries). API_KEY is the older variable name.
    openai_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("openai_api_key", "api_key"),
    )
    summary_model: str = "gpt-4o-mini"
    summary_temperature: float = 0.3

    # Admin screen shared secret (empty keeps the admin screen locked)
    admin_secret: str = ""

    # Localization
    default_language: str = "en"

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"  # Ignore extra env vars

    @field_validator('supabase_url', mode='before')
    @classmethod
    def strip_trailing_slash(cls, v):
        """REST paths are appended to the URL, so drop any trailing slash"""
        if isinstance(v, str):
            return v.strip().rstrip('/')
        return v

    @field_validator('default_language', mode='before')
    @classmethod
    def normalize_language(cls, v):
        """Unknown language codes fall back to English"""
        if isinstance(v, str) and v.strip().lower() in ('en', 'so', 'ar'):
            return v.strip().lower()
        return 'en'


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
