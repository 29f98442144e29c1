# src/semdex/settings.py
"""Configuration management for semdex.

This module contains behavioral settings that apply regardless of which
embedding provider or store is used. Settings are passed programmatically -
the library does not read from environment variables.

For applications that want env-based config, use semdex.config, which reads
env vars and YAML at the application layer and passes values explicitly.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator


class Settings(BaseModel):
    """Behavioral settings for semdex.

    Example:
        settings = Settings(embedding_dimension=1536, max_limit=50)
    """

    # Corpus-wide embedding dimensionality; every stored vector must match
    embedding_dimension: int = Field(default=1024, gt=0)

    # Result limits for the tool-facing search operations
    default_limit: int = Field(default=5, gt=0)
    max_limit: int = Field(default=20, gt=0)

    # Ingestion: log progress every N written chunks
    progress_interval: int = Field(default=500, gt=0)

    # Retry configuration (LiteLLM handles exponential backoff for RateLimitError)
    num_retries: int = Field(default=3, ge=0)

    @model_validator(mode="after")
    def _check_limits(self) -> Settings:
        if self.default_limit > self.max_limit:
            raise ValueError(
                f"default_limit ({self.default_limit}) must not exceed max_limit ({self.max_limit})"
            )
        return self
