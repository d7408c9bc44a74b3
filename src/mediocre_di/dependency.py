"""Dependency descriptors describing how to produce a single dependency."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import KW_ONLY, dataclass
from enum import Enum
from typing import Any

from mediocre_di.errors import InvalidDependencyError


class ResolverStrategy(str, Enum):
    """How a dependency's resolver is turned into a value."""

    CLASS = "class"
    FACTORY = "factory"
    INSTANCE = "instance"


class Lifetime(str, Enum):
    """How long a resolved value is kept by the container."""

    SINGLETON = "singleton"
    PER_REQUEST = "per_request"


@dataclass(frozen=True, eq=False)
class Dependency:
    """Descriptor for a dependency and the dependencies it is built from.

    Descriptors compare and hash by identity, so two descriptors with the
    same fields are still cached separately by a container.

    Attributes:
        resolver: Class, factory callable or pre-built instance, depending on strategy
        strategy: How the resolver produces the value ("class", "factory" or "instance")
        lifetime: Whether the value is cached ("singleton") or rebuilt ("per_request")
        subdependencies: A Dependency, a sequence of them or a mapping of them,
            resolved first and passed to the resolver as its only argument

    Example:
        ```python
        settings = Dependency(Settings)
        database = Dependency(
            connect,
            strategy=ResolverStrategy.FACTORY,
            subdependencies={"settings": settings},
        )
        ```

    """

    resolver: Any
    _: KW_ONLY
    strategy: ResolverStrategy = ResolverStrategy.CLASS
    lifetime: Lifetime = Lifetime.SINGLETON
    subdependencies: (
        Dependency | Sequence[Dependency] | Mapping[str, Dependency] | None
    ) = None

    def __post_init__(self) -> None:
        """Reject descriptors without a resolver.

        Raises:
            InvalidDependencyError: If resolver is None

        """
        if self.resolver is None:
            raise InvalidDependencyError(
                "resolver required when creating a dependency", self
            )
