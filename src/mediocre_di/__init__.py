"""mediocre-di - a minimal dependency injection container.

This package resolves Dependency descriptors into constructed object graphs,
caching singleton values per container.
"""

__version__ = "0.1.0"

from mediocre_di.configuration import ContainerConfiguration
from mediocre_di.container import Container
from mediocre_di.dependency import Dependency, Lifetime, ResolverStrategy
from mediocre_di.errors import (
    ConstructionFailedError,
    InvalidDependencyError,
    InvalidLifetimeForInstanceError,
    MediocreDIError,
    MissingInstanceError,
    MissingResolverError,
    NotADependencyError,
    NotCallableError,
    NotConstructableError,
    ResolutionError,
    UnknownStrategyError,
)
from mediocre_di.provider import DependencyProvider

__all__ = [
    # Version
    "__version__",
    # Dependency Injection
    "Container",
    "ContainerConfiguration",
    "Dependency",
    "DependencyProvider",
    "Lifetime",
    "ResolverStrategy",
    # Errors
    "MediocreDIError",
    "ConstructionFailedError",
    "InvalidDependencyError",
    "InvalidLifetimeForInstanceError",
    "MissingInstanceError",
    "MissingResolverError",
    "NotADependencyError",
    "NotCallableError",
    "NotConstructableError",
    "ResolutionError",
    "UnknownStrategyError",
]
