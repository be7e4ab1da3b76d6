"""
Configuration management for the MaxJobOffers backend.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # LLM
    openai_api_key: str = ""
    openai_model: str = "gpt-4"
    generation_temperature: float = 0.2
    llm_timeout: float = 60.0
    llm_max_retries: int = 0

    # Serve deterministic mock content when generation fails (dev/test only)
    mock_fallback_enabled: bool = False

    # Database
    database_url: str = ""

    # Job listings
    google_jobs_api_key: str = ""
    google_jobs_api_url: str = "https://jobs.googleapis.com/v4/jobs:search"
    search_timeout: float = 30.0
    search_cache_ttl: int = 900
    search_cache_size: int = 256

    # Hosted auth layer (sign-in happens upstream of this service)
    google_client_id: str = ""
    google_client_secret: str = ""

    # Billing
    signup_credits: int = 3
    # Shared secret the payment gateway integration sends as X-Billing-Secret
    billing_secret: str = ""

    # API
    generation_rate_limit: str = "20/minute"
    cors_origins: str = "http://localhost:5173"
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"  # Ignore extra env vars


settings = Settings()
