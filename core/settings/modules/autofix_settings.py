from __future__ import annotations

from pydantic import Field, field_validator

from core.settings.base import AutoFixBaseSettings


class AutoFixSettings(AutoFixBaseSettings):
    """
    AutoFix workflow settings.
    Loaded from environment / .env with exact variable name matching.
    """

    # Decision
    confidence_threshold: float = Field(default=90.0, alias="AUTOFIX_CONFIDENCE_THRESHOLD")

    # Audit
    audit_actor: str = Field(default="AutoFixWorkflow", alias="AUTOFIX_AUDIT_ACTOR")

    # Routing
    default_branch: str = Field(default="main", alias="AUTOFIX_DEFAULT_BRANCH")
    commit_summary_length: int = Field(default=50, alias="AUTOFIX_COMMIT_SUMMARY_LENGTH")

    # Logging
    log_level: str = Field(default="INFO", alias="AUTOFIX_LOG_LEVEL")

    @field_validator("confidence_threshold")
    @classmethod
    def validate_threshold(cls, v: float) -> float:
        if not 0.0 <= v <= 100.0:
            raise ValueError("Confidence threshold must be between 0 and 100")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level
