"""Configuration for the dependency container.

Configuration supports both explicit instantiation and environment variable
fallback through ``from_properties()``.
"""

from __future__ import annotations

import os
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field


class ContainerConfiguration(BaseModel):
    """Configuration for a Container with environment fallback.

    Attributes:
        thread_safe: Serialise resolution behind a re-entrant lock so that each
            singleton dependency is constructed exactly once across threads

    Example:
        ```python
        # Explicit configuration
        config = ContainerConfiguration(thread_safe=True)

        # Zero-config (reads from environment)
        config = ContainerConfiguration.from_properties({})
        ```

    """

    model_config = ConfigDict(
        # Immutable - configuration cannot be modified after creation
        frozen=True,
        # Strict - extra fields not in the model are rejected
        extra="forbid",
        validate_assignment=True,
    )

    thread_safe: bool = Field(
        default=False,
        description="Guard dependency resolution with a container-wide lock",
    )

    @classmethod
    def from_properties(cls, properties: dict[str, Any]) -> Self:
        """Create configuration from properties with environment fallback.

        Environment variables used:
        - MEDIOCRE_DI_THREAD_SAFE: Enable locking ("true"/"1"/"yes")

        Args:
            properties: Configuration properties dictionary

        Returns:
            Validated configuration instance

        Raises:
            ValidationError: If properties are invalid or contain unknown fields

        """
        config_data = properties.copy()

        if "thread_safe" not in config_data:
            thread_safe_env = os.getenv("MEDIOCRE_DI_THREAD_SAFE", "")
            config_data["thread_safe"] = thread_safe_env.lower() in (
                "true",
                "1",
                "yes",
            )

        return cls.model_validate(config_data)
