"""
Application settings using Pydantic.

This module provides runtime configuration with environment variable support.
"""

from pathlib import Path
from typing import TYPE_CHECKING, Dict, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from intentbot.config.constants import (
    DEFAULT_ALGORITHM,
    DEFAULT_CUTOFF,
    DEFAULT_ITERATIONS,
    DEFAULT_REGULARIZATION,
    DEFAULT_RESPONSES,
    DEFAULT_SPACY_MODEL,
    DEFAULT_TOLERANCE,
    TERMINAL_INTENT,
    TRAINING_ALGORITHMS,
)

if TYPE_CHECKING:
    from intentbot.classification.maxent import TrainingOptions


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Settings can be overridden via environment variables prefixed with INTENTBOT_
    For example: INTENTBOT_CUTOFF=2
    """

    model_config = SettingsConfigDict(
        env_prefix="INTENTBOT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Resources
    corpus_path: Optional[Path] = Field(
        default=None,
        description="Training corpus file (defaults to the packaged corpus)",
    )

    spacy_model: str = Field(
        default=DEFAULT_SPACY_MODEL,
        description="spaCy pipeline name or directory for the annotators",
    )

    # Classifier training
    cutoff: int = Field(
        default=DEFAULT_CUTOFF,
        description="Minimum feature frequency kept for training",
        ge=0,
    )

    iterations: int = Field(
        default=DEFAULT_ITERATIONS,
        description="Maximum training iterations",
        ge=1,
        le=10000,
    )

    tolerance: float = Field(
        default=DEFAULT_TOLERANCE,
        description="Log-likelihood convergence threshold",
        ge=0.0,
    )

    algorithm: str = Field(
        default=DEFAULT_ALGORITHM,
        description="Training algorithm (gis, lbfgs)",
    )

    regularization: float = Field(
        default=DEFAULT_REGULARIZATION,
        description="Inverse L2 strength for lbfgs",
        gt=0.0,
    )

    lemmatize_corpus: bool = Field(
        default=True,
        description="Run corpus text through the annotators before training",
    )

    # Conversation
    terminal_intent: str = Field(
        default=TERMINAL_INTENT,
        description="Intent that ends the conversation",
    )

    responses: Dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_RESPONSES),
        description="Canned response per intent",
    )

    # Runtime
    log_level: str = Field(
        default="INFO",
        description="Root log level for the chat CLI",
    )

    @field_validator("algorithm")
    @classmethod
    def _check_algorithm(cls, value: str) -> str:
        value = value.lower()
        if value not in TRAINING_ALGORITHMS:
            raise ValueError(
                f"algorithm must be one of {', '.join(TRAINING_ALGORITHMS)}, got {value!r}"
            )
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        return value.upper()

    def training_options(self) -> "TrainingOptions":
        """Build TrainingOptions from the classifier settings."""
        from intentbot.classification.maxent import TrainingOptions

        return TrainingOptions(
            cutoff=self.cutoff,
            iterations=self.iterations,
            tolerance=self.tolerance,
            algorithm=self.algorithm,
            regularization=self.regularization,
        )
