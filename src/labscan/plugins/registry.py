"""Named registry of interchangeable implementations.

labscan keeps its scanning engines in a ``PluginRegistry`` so callers
can pick one by name (``tokenize(source, engine="pattern")``, the CLI
``--engine`` option) and so other packages can contribute engines by
declaring entry-points in their own ``pyproject.toml``.

Each registry knows the entry-point group it reads from, so callers do
not repeat the group name.

Example
-------
Register an engine with the decorator::

    from labscan.lexer import Tokenizer, tokenizer_registry

    @tokenizer_registry.register("upper")
    class UpperScanner(Tokenizer):
        def scan(self):
            ...

Build an instance by name::

    tokens = tokenizer_registry.create("upper", source).scan()

Pick up engines shipped by installed packages::

    tokenizer_registry.load_entrypoints()
"""
from __future__ import annotations

import importlib.metadata
import logging
from abc import ABC
from collections.abc import Callable, Iterator
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=ABC)


class PluginNotFoundError(KeyError):
    """Raised when a requested name is not in the registry.

    ``available`` lists the names that were registered at the time, so
    callers can show the valid choices.
    """

    def __init__(self, name: str, registry_name: str, available: list[str] | None = None) -> None:
        self.plugin_name = name
        self.registry_name = registry_name
        self.available = list(available or [])
        choices = ", ".join(self.available) or "none"
        super().__init__(f"No {registry_name} entry named {name!r}. Available: {choices}.")


class PluginAlreadyRegisteredError(ValueError):
    """Raised when a name is registered twice."""

    def __init__(self, name: str, registry_name: str) -> None:
        self.plugin_name = name
        self.registry_name = registry_name
        super().__init__(f"{registry_name} entry {name!r} already exists; deregister it first.")


class PluginRegistry(Generic[T]):
    """Maps names to subclasses of one abstract base.

    Parameters
    ----------
    base_class:
        Every registered class must subclass it.
    name:
        Label used in error and log messages.
    entrypoint_group:
        Entry-point group read by ``load_entrypoints`` when no group is
        passed explicitly.
    """

    def __init__(self, base_class: type[T], name: str, entrypoint_group: str | None = None) -> None:
        self._base_class = base_class
        self._name = name
        self._group = entrypoint_group
        self._plugins: dict[str, type[T]] = {}

    @property
    def entrypoint_group(self) -> str | None:
        return self._group

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(self, name: str) -> Callable[[type[T]], type[T]]:
        """Class decorator form of ``register_class``."""

        def decorator(cls: type[T]) -> type[T]:
            self.register_class(name, cls)
            return cls

        return decorator

    def register_class(self, name: str, cls: type[T]) -> None:
        """Register ``cls`` under ``name``.

        Raises
        ------
        PluginAlreadyRegisteredError
            If ``name`` is taken.
        TypeError
            If ``cls`` does not subclass ``base_class``.
        """
        if name in self._plugins:
            raise PluginAlreadyRegisteredError(name, self._name)
        if not (isinstance(cls, type) and issubclass(cls, self._base_class)):
            raise TypeError(f"{cls!r} is not a {self._base_class.__name__} subclass; cannot register {name!r}.")
        self._plugins[name] = cls
        logger.debug("%s: registered %r as %s", self._name, name, cls.__qualname__)

    def deregister(self, name: str) -> None:
        """Remove ``name``.

        Raises
        ------
        PluginNotFoundError
            If ``name`` is not registered.
        """
        if self._plugins.pop(name, None) is None:
            raise PluginNotFoundError(name, self._name, self.list_plugins())
        logger.debug("%s: deregistered %r", self._name, name)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, name: str) -> type[T]:
        """Return the class registered under ``name``.

        Raises
        ------
        PluginNotFoundError
            If nothing is registered under ``name``.
        """
        cls = self._plugins.get(name)
        if cls is None:
            raise PluginNotFoundError(name, self._name, self.list_plugins())
        return cls

    def create(self, name: str, *args: Any, **kwargs: Any) -> T:
        """Instantiate the class registered under ``name``."""
        return self.get(name)(*args, **kwargs)

    def list_plugins(self) -> list[str]:
        """Registered names, sorted."""
        return sorted(self._plugins)

    def items(self) -> Iterator[tuple[str, type[T]]]:
        """Yield ``(name, class)`` pairs in name order."""
        for name in self.list_plugins():
            yield name, self._plugins[name]

    def __contains__(self, name: object) -> bool:
        return name in self._plugins

    def __len__(self) -> int:
        return len(self._plugins)

    def __repr__(self) -> str:
        return f"PluginRegistry({self._name!r}, base={self._base_class.__name__}, plugins={self.list_plugins()})"

    # ------------------------------------------------------------------
    # Entry-point loading
    # ------------------------------------------------------------------

    def load_entrypoints(self, group: str | None = None) -> int:
        """Register the classes declared under an entry-point group.

        ``group`` defaults to the registry's own ``entrypoint_group``.
        Names already present are left alone, so calling this repeatedly
        is harmless.  Broken or unsuitable entry-points are logged and
        skipped.

        Returns
        -------
        int
            How many classes were added.

        Example
        -------
        In a downstream package's ``pyproject.toml``::

            [project.entry-points."labscan.tokenizers"]
            upper = "my_package.scanners:UpperScanner"
        """
        group = group or self._group
        if group is None:
            raise ValueError(f"{self._name} registry has no entry-point group")
        loaded = 0
        for ep in importlib.metadata.entry_points(group=group):
            if ep.name in self._plugins:
                logger.debug("%s: entry-point %r already registered", self._name, ep.name)
            elif self._load_entrypoint(ep, group):
                loaded += 1
        return loaded

    def _load_entrypoint(self, ep: importlib.metadata.EntryPoint, group: str) -> bool:
        try:
            cls = ep.load()
        except Exception:
            logger.exception("%s: entry-point %r in group %r failed to import", self._name, ep.name, group)
            return False
        try:
            self.register_class(ep.name, cls)
        except (PluginAlreadyRegisteredError, TypeError) as exc:
            logger.warning("%s: entry-point %r skipped: %s", self._name, ep.name, exc)
            return False
        return True
