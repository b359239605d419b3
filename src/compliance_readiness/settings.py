"""Settings for the compliance readiness engine.

All values may be overridden with environment variables using the
COMPLIANCE_READINESS_ prefix (e.g. COMPLIANCE_READINESS_LOG_LEVEL=DEBUG).
"""

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings for compliance-readiness.

    Environment variable prefix: COMPLIANCE_READINESS_
    """

    service_name: str = "compliance-readiness"

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    # Readiness classification (inclusive lower bounds)
    high_readiness_threshold: float = Field(default=80.0, ge=0.0, le=100.0)
    moderate_readiness_threshold: float = Field(default=50.0, ge=0.0, le=100.0)

    # Strength extraction
    strength_weight_threshold: float = Field(default=2.5, gt=0.0)
    max_strengths: int = Field(default=5, ge=0)

    model_config = SettingsConfigDict(env_prefix="COMPLIANCE_READINESS_")

    @model_validator(mode="after")
    def _check_threshold_order(self) -> "Settings":
        """Reject a moderate threshold above the high threshold."""
        if self.moderate_readiness_threshold > self.high_readiness_threshold:
            raise ValueError(
                f"moderate_readiness_threshold ({self.moderate_readiness_threshold}) must not "
                f"exceed high_readiness_threshold ({self.high_readiness_threshold})"
            )
        return self
