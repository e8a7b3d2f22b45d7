"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Database
    database_url: str = "sqlite+aiosqlite:///careerlog.db"

    # Logging
    log_level: str = "info"
    json_logs: bool = False

    # Derived metric windows (calendar months)
    expiring_window_months: int = 3
    recent_window_months: int = 6
    recent_projects_limit: int = 2

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "CAREERLOG_",
    }


settings = Settings()
