"""Configuration management for the Naviksha career match engine.

This module handles configuration loading and validation using Pydantic
Settings for type safety and environment variable support.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, ValidationError, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from naviksha.schemas.career_schemas import ScoringWeights
from naviksha.utils.constants import DEFAULT_RIASEC_MAX_SCORE, ScoringDefaults
from naviksha.utils.exceptions import ConfigurationError
from naviksha.utils.logger import get_logger, setup_logging


class Settings(BaseSettings):
    """Application settings with validation and type hints."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Application Settings
    APP_NAME: str = Field(default="Naviksha", description="Application name")
    APP_VERSION: str = Field(default="1.0.0", description="Application version")
    APP_ENV: str = Field(
        default="development",
        description="Application environment",
        pattern="^(development|test|staging|production)$",
    )

    # Logging Configuration
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )
    LOG_DIR: Optional[str] = Field(
        default=None, description="Directory for log files, console only when unset"
    )

    # Scoring Weights
    RIASEC_WEIGHT: float = Field(
        default=ScoringDefaults.RIASEC_WEIGHT, description="Personality fit weight", ge=0.0
    )
    SUBJECT_WEIGHT: float = Field(
        default=ScoringDefaults.SUBJECT_WEIGHT, description="Academic performance weight", ge=0.0
    )
    CONTEXT_WEIGHT: float = Field(
        default=ScoringDefaults.CONTEXT_WEIGHT, description="Family context weight", ge=0.0
    )
    PRACTICAL_WEIGHT: float = Field(
        default=ScoringDefaults.PRACTICAL_WEIGHT, description="Practical preferences weight", ge=0.0
    )

    # Scoring Constants
    RIASEC_MAX_SCORE: float = Field(
        default=DEFAULT_RIASEC_MAX_SCORE,
        description="Maximum achievable RIASEC accumulator (Likert questions x 3)",
        gt=0.0,
    )
    MAX_MATCH_REASONS: int = Field(
        default=ScoringDefaults.MAX_MATCH_REASONS, description="Reasons kept per career", ge=0
    )
    BUCKET_TOP_CAREERS: int = Field(
        default=ScoringDefaults.BUCKET_TOP_CAREERS,
        description="Careers kept per bucket and used for the bucket score",
        ge=1,
    )
    REPORT_TOP_BUCKETS: int = Field(
        default=ScoringDefaults.REPORT_TOP_BUCKETS, description="Buckets included in a report", ge=1
    )

    # EduStats question ids
    EDU_GRADES_QUESTION_ID: str = Field(default="e_grades", description="Numeric grid of subject grades")
    EDU_PARENT_CAREERS_QUESTION_ID: str = Field(default="e_parent_careers", description="Parent careers")
    EDU_FAMILY_PREFERENCES_QUESTION_ID: str = Field(
        default="e_family_new_age", description="Family view on new-age careers"
    )
    EDU_STUDY_DURATION_QUESTION_ID: str = Field(
        default="e_long_study", description="Willingness to study for 5+ years"
    )
    EDU_WORK_STYLE_QUESTION_ID: str = Field(default="e_work_style", description="Preferred work style")
    EDU_INTERNATIONAL_STUDY_QUESTION_ID: str = Field(
        default="e_study_abroad", description="Interest in studying abroad"
    )

    @model_validator(mode="after")
    def check_weight_total(self) -> "Settings":
        """Warn when scoring weights do not sum to 1.0."""
        total = self.RIASEC_WEIGHT + self.SUBJECT_WEIGHT + self.CONTEXT_WEIGHT + self.PRACTICAL_WEIGHT
        if abs(total - 1.0) > 1e-6:
            get_logger(__name__).warning(
                "Scoring weights do not sum to 1.0",
                extra={"weight_total": total}
            )
        return self

    def get_scoring_weights(self) -> ScoringWeights:
        """Build the default ScoringWeights from these settings."""
        return ScoringWeights(
            riasec_weight=self.RIASEC_WEIGHT,
            subject_weight=self.SUBJECT_WEIGHT,
            context_weight=self.CONTEXT_WEIGHT,
            practical_weight=self.PRACTICAL_WEIGHT,
        )

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.APP_ENV == "production"

    def is_test(self) -> bool:
        """Check if running in test environment."""
        return self.APP_ENV == "test"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings: Application settings instance

    Raises:
        ConfigurationError: If the environment holds invalid settings
    """
    try:
        settings = Settings()
    except ValidationError as e:
        invalid = ", ".join(str(error["loc"][0]) for error in e.errors() if error["loc"])
        raise ConfigurationError(
            f"Invalid configuration: {invalid}", setting=invalid or None, cause=e
        ) from e

    # Setup logging based on settings
    setup_logging(
        environment=settings.APP_ENV,
        log_level=settings.LOG_LEVEL,
        log_dir=settings.LOG_DIR,
    )

    return settings
