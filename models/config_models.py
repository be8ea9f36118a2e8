"""Configuration models for validation using Pydantic."""

from typing import Optional
from pydantic import BaseModel, Field, field_validator


class CredentialsConfig(BaseModel):
    """API credentials loaded from environment variables."""

    github_token: Optional[str] = Field(None, description="GitHub personal access token")

    @field_validator("github_token")
    @classmethod
    def validate_github_token(cls, v: Optional[str]) -> Optional[str]:
        """Reject the placeholder token shipped in example env files."""
        if v == "ghp_your_token_here":
            raise ValueError("GitHub token must be set in .env file or passed with --token")
        # Treat an empty variable the same as an unset one
        return v or None


class TriageConfig(BaseModel):
    """Settings that influence classification and fetching."""

    # Assignee allowlist: when non-empty, open issues not assigned to one of
    # these logins are classified as blocked
    maintainers: tuple[str, ...] = Field(default=(), description="Known maintainer logins")
    per_page: int = Field(default=100, ge=1, le=100, description="Issues requested per API page")

    @field_validator("maintainers", mode="before")
    @classmethod
    def split_maintainers(cls, v):
        """Accept a comma-separated string as well as a sequence."""
        if v is None:
            return ()
        if isinstance(v, str):
            return tuple(login.strip() for login in v.split(",") if login.strip())
        return tuple(v)


class Config(BaseModel):
    """Application configuration."""

    credentials: CredentialsConfig
    triage: TriageConfig = Field(default_factory=TriageConfig)
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the standard levels."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Log level must be one of: {', '.join(valid_levels)}")
        return v_upper
