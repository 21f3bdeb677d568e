"""Search configuration with environment fallback.

Configuration is layered:
1. Explicit properties (highest priority)
2. Environment variables (fallback)
3. Defaults (lowest priority)

The package directory also ships ``logging.yaml``, the default logging
configuration loaded by ``termgap.logging``.
"""

from __future__ import annotations

import os
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from termgap.errors import ConfigurationError
from termgap.types import MAX_GAP

_ENV_VARS = {
    "max_matches": "TERMGAP_MAX_MATCHES",
    "max_gap": "TERMGAP_MAX_GAP",
    "chunk_size": "TERMGAP_CHUNK_SIZE",
    "workers": "TERMGAP_WORKERS",
}


class SearchConfiguration(BaseModel):
    """Limits and tuning for the search engine.

    Attributes:
        max_matches: Matches returned before a search stops (the cap)
        max_gap: Largest gap limit a request may ask for
        chunk_size: Primary characters per window when scanning
        workers: Threads used to link term A occurrences (1 = sequential)

    Example:
        ```python
        # Explicit configuration
        config = SearchConfiguration(max_matches=100)

        # Zero-config (reads TERMGAP_* variables from the environment)
        config = SearchConfiguration.from_properties({})
        ```

    """

    model_config = ConfigDict(
        # Immutable - configuration cannot be modified after creation
        frozen=True,
        # Strict - extra fields not in the model are rejected
        extra="forbid",
    )

    max_matches: int = Field(
        default=10_000,
        ge=1,
        le=1_000_000,
        description="Maximum number of matches returned by one search",
    )
    max_gap: int = Field(
        default=MAX_GAP,
        ge=0,
        le=MAX_GAP,
        description="Largest gap limit accepted in a request",
    )
    chunk_size: int = Field(
        default=65_536,
        ge=1_024,
        le=10_000_000,
        description="Primary characters per scanning window",
    )
    workers: int = Field(
        default=1,
        ge=1,
        le=64,
        description="Worker threads for linking (1 runs sequentially)",
    )

    @classmethod
    def from_properties(cls, properties: dict[str, Any]) -> Self:
        """Create configuration from properties with environment fallback.

        Environment variables used:
        - TERMGAP_MAX_MATCHES: Match cap
        - TERMGAP_MAX_GAP: Largest accepted gap limit
        - TERMGAP_CHUNK_SIZE: Scanning window size
        - TERMGAP_WORKERS: Linking worker threads

        Args:
            properties: Configuration properties dictionary

        Returns:
            Validated configuration instance

        Raises:
            ConfigurationError: If a value is not an integer or is out of range

        """
        config_data = properties.copy()

        for field_name, env_var in _ENV_VARS.items():
            if field_name in config_data:
                continue
            raw = os.getenv(env_var)
            if raw is None or not raw.strip():
                continue
            try:
                config_data[field_name] = int(raw)
            except ValueError as e:
                raise ConfigurationError(
                    f"{env_var} must be an integer, got: {raw!r}"
                ) from e

        try:
            return cls.model_validate(config_data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid search configuration: {e}") from e
