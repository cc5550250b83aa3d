import json
from pathlib import Path
from typing import Annotated

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class TrackerSettings(BaseSettings):
    """Settings for the remote task document, the write credential and the closed value sets."""

    # ── Remote document store ──
    store_base_url: str = Field(default="https://api.jsonbin.io/v3/b", description="Document store base URL")
    store_document_id: str = Field(..., description="Key of the document holding the task collection")
    store_access_key: SecretStr = Field(..., description="Sent as the X-Access-Key header")
    store_timeout_seconds: float = Field(default=10.0, gt=0)
    fetch_max_attempts: int = Field(default=3, ge=1, description="Retry budget for read-only fetches")

    # ── Write access ──
    expected_credential: SecretStr = Field(..., description="Shared secret unlocking write operations")
    credential_store_path: Path = Field(default=Path("~/.tasktrack/credentials.json"), validate_default=True)
    credential_key: str = Field(default="tasktrack-access")

    # ── Closed value sets ──
    project_names: Annotated[list[str], NoDecode] = Field(default_factory=lambda: ["MyGraPARI", "OM"])
    deploy_targets: Annotated[list[str], NoDecode] = Field(default_factory=lambda: ["development", "staging", "production"])
    task_statuses: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["completed", "in progress", "pending", "not started"]
    )

    @field_validator("project_names", "deploy_targets", "task_statuses", mode="before")
    @classmethod
    def parse_list(cls, value: object) -> object:
        """Accept a JSON array or a comma-separated string from the environment."""
        if isinstance(value, str):
            stripped = value.strip()
            if stripped.startswith("["):
                parsed = json.loads(stripped)
                if not isinstance(parsed, list):
                    raise ValueError(f"Expected a JSON list, got {type(parsed).__name__}")
                return parsed
            return [item.strip() for item in stripped.split(",") if item.strip()]
        return value

    @field_validator("project_names", "task_statuses")
    @classmethod
    def not_empty(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("At least one value is required.")
        return value

    @field_validator("credential_store_path")
    @classmethod
    def expand_home(cls, value: Path) -> Path:
        return value.expanduser()

    model_config = SettingsConfigDict(
        env_prefix="TRACKER_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )
