"""Exception-safe access to a Container for optional dependencies.

This module provides a wrapper around Container that returns None instead of
raising when a dependency cannot be resolved.
"""

from __future__ import annotations

import logging
from typing import Any

from mediocre_di.container import Container
from mediocre_di.dependency import Dependency
from mediocre_di.errors import MediocreDIError

logger = logging.getLogger(__name__)


class DependencyProvider:
    """Provider for optional dependencies with exception-safe retrieval.

    Unlike calling container.provide_single() directly (which raises), this
    provider returns None for dependencies that cannot be resolved, enabling
    graceful degradation.

    Example:
        ```python
        container = Container()
        provider = DependencyProvider(container)

        cache = provider.get(Dependency(RedisCache, subdependencies=settings))
        if cache is None:
            cache = InMemoryCache()
        ```

    """

    def __init__(self, container: Container) -> None:
        """Initialise provider with a container.

        Args:
            container: Container resolving and caching dependencies

        """
        self._container: Container = container
        logger.debug("DependencyProvider initialised")

    @property
    def container(self) -> Container:
        """Get the underlying container."""
        return self._container

    def get(self, dependency: Dependency) -> Any | None:
        """Get the value for a dependency, or None if it cannot be resolved.

        Args:
            dependency: The dependency to resolve

        Returns:
            Resolved value, or None if resolution raised a container error.

        """
        try:
            return self._container.provide_single(dependency)
        except MediocreDIError as e:
            logger.debug("Dependency %r unavailable: %s", dependency, e)
            return None

    def is_available(self, dependency: Dependency) -> bool:
        """Check if a dependency can be resolved.

        Resolving a singleton dependency here caches it in the container.

        Args:
            dependency: The dependency to check

        Returns:
            True if the dependency resolves to a value, False otherwise

        """
        return self.get(dependency) is not None
