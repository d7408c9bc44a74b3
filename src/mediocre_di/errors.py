"""Error classes for the mediocre-di container.

This module provides:
- MediocreDIError: Base exception class for all container errors
- InvalidDependencyError: Dependency descriptor construction exception
- ResolutionError: Base exception for failures while providing a dependency
- NotADependencyError, MissingResolverError, NotConstructableError,
  NotCallableError, ConstructionFailedError, InvalidLifetimeForInstanceError,
  MissingInstanceError, UnknownStrategyError: Resolution exceptions
"""

from __future__ import annotations

from typing import Any


class MediocreDIError(Exception):
    """Base exception for all mediocre-di errors.

    Attributes:
        dependency: The descriptor (or offending value) that triggered the error

    """

    def __init__(self, message: str, dependency: Any = None) -> None:
        """Initialise the error.

        Args:
            message: Human-readable description of the failure
            dependency: The descriptor or value being processed when it failed

        """
        super().__init__(message)
        self.message = message
        self.dependency = dependency


class InvalidDependencyError(MediocreDIError):
    """Raised when a dependency descriptor is created without a resolver."""

    pass


class ResolutionError(MediocreDIError):
    """Base exception for errors raised while providing a dependency."""

    pass


class NotADependencyError(ResolutionError):
    """Raised when a value that is not a Dependency is given to the container."""

    pass


class MissingResolverError(ResolutionError):
    """Raised when a class or factory dependency has no resolver."""

    pass


class NotConstructableError(ResolutionError):
    """Raised when a class dependency's resolver is not a class."""

    pass


class NotCallableError(ResolutionError):
    """Raised when a factory dependency's resolver is not callable."""

    pass


class ConstructionFailedError(ResolutionError):
    """Raised when a resolver raises while constructing a value.

    The original exception is chained as ``__cause__`` and exposed as ``cause``.
    """

    @property
    def cause(self) -> BaseException | None:
        """Get the exception raised by the resolver."""
        return self.__cause__


class InvalidLifetimeForInstanceError(ResolutionError):
    """Raised when an instance dependency does not have singleton lifetime."""

    pass


class MissingInstanceError(ResolutionError):
    """Raised when an instance dependency has no instance to provide."""

    pass


class UnknownStrategyError(ResolutionError):
    """Raised when a dependency's resolver strategy is not recognised."""

    pass
