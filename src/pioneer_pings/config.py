"""Runtime configuration for pioneer-pings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(env_prefix="PIONEER_PINGS_", env_file=".env", extra="ignore")

    app_name: str = "pioneer-pings"
    log_level: str = "INFO"
    participant_id: str | None = Field(
        default=None,
        description="Participant id used by CLI commands when --participant-id is omitted.",
    )
    diagnostics_enabled: bool = True


settings = Settings()
