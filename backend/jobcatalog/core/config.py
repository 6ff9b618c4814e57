from __future__ import annotations
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "Job Catalog"
    env: str = "dev"
    log_level: str = "INFO"

    database_url: str = "sqlite:///./jobcatalog.db"

    # Ingestion
    site_delay_seconds: float = 5.0
    staleness_hours: int = 72
    error_summary_limit: int = 1000

    # Fuzzy duplicate matching
    fuzzy_score_cutoff: float = 85.0
    fuzzy_candidate_limit: int = 500
    fuzzy_scope_by_city: bool = True


settings = Settings()
