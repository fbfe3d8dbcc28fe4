from pydantic_settings import BaseSettings, SettingsConfigDict


class DashboardEnv(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    weatherdash_log_level: str = "WARNING"
    weatherdash_config: str | None = None
