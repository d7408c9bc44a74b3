"""Dependency container resolving descriptors into constructed object graphs."""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping, Sequence
from contextlib import AbstractContextManager, nullcontext
from typing import Any, NoReturn, TypeVar

from mediocre_di.configuration import ContainerConfiguration
from mediocre_di.dependency import Dependency, Lifetime, ResolverStrategy
from mediocre_di.errors import (
    ConstructionFailedError,
    InvalidLifetimeForInstanceError,
    MissingInstanceError,
    MissingResolverError,
    NotADependencyError,
    NotCallableError,
    NotConstructableError,
    ResolutionError,
    UnknownStrategyError,
)

logger = logging.getLogger(__name__)

K = TypeVar("K")


class Container:
    """Dependency injection container providing values for Dependency descriptors.

    Sub-dependencies are resolved depth-first before the dependency that needs
    them. Values of singleton dependencies are cached by descriptor identity for
    the lifetime of the container; per-request dependencies are rebuilt on every
    call.

    Example:
        ```python
        container = Container()
        leaf = Dependency(Leaf)
        inner = Dependency(Inner, subdependencies=leaf)
        outer = Dependency(Outer, subdependencies={"inner": inner})

        app = container.provide(outer)
        ```

    """

    def __init__(self, config: ContainerConfiguration | None = None) -> None:
        """Initialise the container.

        Args:
            config: Container configuration (defaults are used if None)

        """
        self._config = config or ContainerConfiguration()
        # Values are heterogeneous; identity hashing of Dependency keys the cache
        self._singletons: dict[Dependency, Any] = {}
        self._lock: AbstractContextManager[Any] = (
            threading.RLock() if self._config.thread_safe else nullcontext()
        )
        logger.debug("Container initialized (thread_safe=%s)", self._config.thread_safe)

    @property
    def config(self) -> ContainerConfiguration:
        """Get the container configuration."""
        return self._config

    def provide(self, dependencies: Any) -> Any:
        """Provide values for one dependency, a sequence of them or a mapping of them.

        Args:
            dependencies: A Dependency, a sequence of Dependency objects, or a
                mapping whose values are Dependency objects

        Returns:
            The resolved value, a list of resolved values in input order, or a
            dict with the same keys mapped to resolved values

        Raises:
            ResolutionError: If any dependency in the request cannot be resolved

        """
        if isinstance(dependencies, Dependency):
            return self.provide_single(dependencies)
        if isinstance(dependencies, Sequence) and not isinstance(
            dependencies, (str, bytes)
        ):
            return self.provide_list(dependencies)
        if isinstance(dependencies, Mapping):
            return self.provide_map(dependencies)
        return self.provide_single(dependencies)

    def provide_list(self, dependencies: Sequence[Dependency]) -> list[Any]:
        """Provide values for an ordered sequence of dependencies.

        Args:
            dependencies: Dependencies to resolve

        Returns:
            Resolved values in the same order as the input

        """
        return [self.provide_single(dependency) for dependency in dependencies]

    def provide_map(self, dependencies: Mapping[K, Dependency]) -> dict[K, Any]:
        """Provide values for every entry of a mapping of dependencies.

        Only the top level is resolved; values must be Dependency objects.

        Args:
            dependencies: Mapping of keys to dependencies

        Returns:
            Dict with the same keys mapped to resolved values

        """
        return {key: self.provide_single(dep) for key, dep in dependencies.items()}

    def provide_single(self, dependency: Dependency) -> Any:
        """Provide the value for a single dependency.

        Args:
            dependency: The dependency to resolve

        Returns:
            The cached singleton value, or a newly constructed value

        Raises:
            NotADependencyError: If dependency is not a Dependency
            ResolutionError: If the dependency or one of its sub-dependencies
                cannot be resolved

        """
        if not isinstance(dependency, Dependency):
            self._fail(
                NotADependencyError(
                    "dependencies must be Dependency instances", dependency
                )
            )

        with self._lock:
            return self._resolve(dependency)

    def _resolve(self, dependency: Dependency) -> Any:
        # None marks "not yet cached", so None-valued singletons are rebuilt
        resolved = self._singletons.get(dependency)
        if resolved is not None:
            logger.debug("Returning cached singleton: %r", dependency.resolver)
            return resolved

        if dependency.subdependencies is None:
            args: tuple[Any, ...] = ()
        else:
            args = (self.provide(dependency.subdependencies),)

        match dependency.strategy:
            case ResolverStrategy.CLASS:
                resolved = self._construct_class(dependency, args)
            case ResolverStrategy.FACTORY:
                resolved = self._invoke_factory(dependency, args)
            case ResolverStrategy.INSTANCE:
                resolved = self._use_instance(dependency)
            case _:
                self._fail(UnknownStrategyError("unknown resolver type", dependency))

        if dependency.lifetime == Lifetime.SINGLETON:
            self._singletons[dependency] = resolved
            logger.debug("Singleton created and cached: %r", dependency.resolver)

        return resolved

    def _construct_class(self, dependency: Dependency, args: tuple[Any, ...]) -> Any:
        resolver_class = dependency.resolver
        if resolver_class is None:
            self._fail(
                MissingResolverError(
                    "class-type dependency has no resolver", dependency
                )
            )
        if not isinstance(resolver_class, type):
            self._fail(
                NotConstructableError(
                    "class-type dependency resolver must be constructable", dependency
                )
            )

        logger.debug("Constructing %s", resolver_class.__name__)
        try:
            return resolver_class(*args)
        except Exception as e:
            logger.error("Construction of %s failed: %s", resolver_class.__name__, e)
            raise ConstructionFailedError(
                "class-type dependency construction failed", dependency
            ) from e

    def _invoke_factory(self, dependency: Dependency, args: tuple[Any, ...]) -> Any:
        factory = dependency.resolver
        if factory is None:
            self._fail(
                MissingResolverError(
                    "factory-type dependency has no resolver", dependency
                )
            )
        if not callable(factory):
            self._fail(
                NotCallableError(
                    "factory-type dependency resolver must be callable", dependency
                )
            )

        logger.debug("Invoking factory %r", factory)
        try:
            return factory(*args)
        except Exception as e:
            logger.error("Factory %r failed: %s", factory, e)
            raise ConstructionFailedError(
                "factory-type dependency construction failed", dependency
            ) from e

    def _use_instance(self, dependency: Dependency) -> Any:
        if dependency.lifetime != Lifetime.SINGLETON:
            self._fail(
                InvalidLifetimeForInstanceError(
                    "instance-type resolver must be on a singleton-type dependency",
                    dependency,
                )
            )
        if dependency.resolver is None:
            self._fail(
                MissingInstanceError(
                    "instance-type dependency must resolve to a value", dependency
                )
            )
        return dependency.resolver

    def _fail(self, error: ResolutionError) -> NoReturn:
        logger.error("%s: %r", error.message, error.dependency)
        raise error
