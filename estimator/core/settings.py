"""Application settings based on pydantic-settings."""

from typing import Annotated, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from estimator.core.config import load_environment


load_environment()


class Settings(BaseSettings):
    """Global application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="ESTIMATOR_",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Literal[
        "development",
        "staging",
        "production",
    ] = "development"
    log_level: str = "INFO"
    log_serialize: bool = Field(
        default=True,
        description="Write logs as JSON lines",
    )

    # CORS
    allowed_origins: Annotated[list[str], NoDecode] = Field(default_factory=lambda: ["*"])

    # Proposals
    proposal_output_dir: str = Field(default="data/proposals")
    proposal_contact_name: str = Field(
        default="Kevin",
        description="Name printed on the proposal contact line",
    )
    proposal_contact_email: str = Field(
        default="[your email]",
        description="Email printed on the proposal contact line",
    )

    # Sessions
    max_sessions: int = Field(
        default=100,
        ge=1,
        description="Discovery call sessions kept in memory",
    )

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def split_origins(cls, value: object) -> list[str]:
        """Turns a comma-separated string into a list of origins."""
        if isinstance(value, str):
            items = [item.strip() for item in value.split(",")]
            return [item for item in items if item]
        if isinstance(value, list):
            return value
        return ["*"]


settings = Settings()
