"""Classifier registry: variant selection by name.

The two built-in variants are registered under ``"default"`` and
``"visual"``.  Third-party packages can add their own classifiers by
declaring entry-points in their ``pyproject.toml`` under the
"utfstring.classifiers" group.

Example
-------
Register a classifier with the decorator::

    from utfstring.classifier import CharClassifier, classifier_registry

    @classifier_registry.register("keycaps")
    class KeycapClassifier(CharClassifier):
        _multi_unit = ...
        _scanner = ...

Load all installed classifiers via entry-points::

    classifier_registry.load_entrypoints("utfstring.classifiers")

Select a variant::

    classifier = get_classifier("visual")
"""
from __future__ import annotations

import importlib.metadata
import logging
from collections.abc import Callable

from utfstring.classifier.classifier import (
    CharClassifier,
    SurrogatePairClassifier,
    VisualClassifier,
)

logger = logging.getLogger(__name__)

ENTRYPOINT_GROUP = "utfstring.classifiers"


class ClassifierNotFoundError(KeyError):
    """Raised when a requested classifier name is not in the registry."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.classifier_name = name
        self.available = available
        super().__init__(
            f"Classifier {name!r} is not registered. "
            f"Available classifiers: {', '.join(available) or '(none)'}."
        )


class ClassifierAlreadyRegisteredError(ValueError):
    """Raised when attempting to register a name that already exists."""

    def __init__(self, name: str) -> None:
        self.classifier_name = name
        super().__init__(
            f"Classifier {name!r} is already registered. "
            "Use a unique name or explicitly deregister the existing entry first."
        )


class ClassifierRegistry:
    """Registry mapping variant names to ``CharClassifier`` subclasses.

    Instances are created lazily on first lookup and cached, so every
    caller asking for the same name shares one stateless classifier.
    """

    def __init__(self) -> None:
        self._classes: dict[str, type[CharClassifier]] = {}
        self._instances: dict[str, CharClassifier] = {}

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(
        self, name: str
    ) -> Callable[[type[CharClassifier]], type[CharClassifier]]:
        """Return a class decorator that registers the decorated classifier.

        Raises
        ------
        ClassifierAlreadyRegisteredError
            If ``name`` is already in use.
        TypeError
            If the decorated class does not subclass ``CharClassifier``.
        """

        def decorator(cls: type[CharClassifier]) -> type[CharClassifier]:
            self.register_class(name, cls)
            return cls

        return decorator

    def register_class(self, name: str, cls: type[CharClassifier]) -> None:
        """Register ``cls`` under ``name`` without the decorator syntax."""
        if name in self._classes:
            raise ClassifierAlreadyRegisteredError(name)
        if not (isinstance(cls, type) and issubclass(cls, CharClassifier)):
            raise TypeError(
                f"Cannot register {cls!r} under {name!r}: "
                "it must be a subclass of CharClassifier."
            )
        self._classes[name] = cls
        logger.debug("Registered classifier %r -> %s", name, cls.__qualname__)

    def deregister(self, name: str) -> None:
        """Remove a classifier from the registry.

        Raises
        ------
        ClassifierNotFoundError
            If ``name`` is not currently registered.
        """
        if name not in self._classes:
            raise ClassifierNotFoundError(name, self.list_classifiers())
        del self._classes[name]
        self._instances.pop(name, None)
        logger.debug("Deregistered classifier %r", name)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get_class(self, name: str) -> type[CharClassifier]:
        """Return the class registered under ``name``."""
        try:
            return self._classes[name]
        except KeyError:
            raise ClassifierNotFoundError(name, self.list_classifiers()) from None

    def get(self, name: str) -> CharClassifier:
        """Return the shared classifier instance registered under ``name``."""
        instance = self._instances.get(name)
        if instance is None:
            instance = self.get_class(name)()
            self._instances[name] = instance
        return instance

    def list_classifiers(self) -> list[str]:
        """Return all registered names in alphabetical order."""
        return sorted(self._classes)

    def __contains__(self, name: object) -> bool:
        return name in self._classes

    def __len__(self) -> int:
        return len(self._classes)

    def __repr__(self) -> str:
        return f"ClassifierRegistry(classifiers={self.list_classifiers()})"

    # ------------------------------------------------------------------
    # Entry-point loading
    # ------------------------------------------------------------------

    def load_entrypoints(self, group: str = ENTRYPOINT_GROUP) -> None:
        """Discover and register classifiers declared as package entry-points.

        Names that are already registered are skipped, so repeated calls
        are idempotent.  A classifier that fails to import is logged and
        skipped rather than aborting the whole load.

        Example
        -------
        In a downstream package's ``pyproject.toml``::

            [project.entry-points."utfstring.classifiers"]
            keycaps = "my_package.classifiers:KeycapClassifier"
        """
        for ep in importlib.metadata.entry_points(group=group):
            if ep.name in self._classes:
                logger.debug("Entry-point %r already registered; skipping.", ep.name)
                continue
            try:
                cls = ep.load()
            except Exception:
                logger.exception(
                    "Failed to load entry-point %r from group %r; skipping.",
                    ep.name,
                    group,
                )
                continue
            try:
                self.register_class(ep.name, cls)
            except (ClassifierAlreadyRegisteredError, TypeError):
                logger.warning(
                    "Entry-point %r loaded but could not be registered; skipping.",
                    ep.name,
                )


classifier_registry = ClassifierRegistry()
classifier_registry.register_class(SurrogatePairClassifier.name, SurrogatePairClassifier)
classifier_registry.register_class(VisualClassifier.name, VisualClassifier)


def get_classifier(name: str = SurrogatePairClassifier.name) -> CharClassifier:
    """Return the shared classifier for the variant ``name``.

    Raises
    ------
    ClassifierNotFoundError
        If no classifier is registered under ``name``.
    """
    return classifier_registry.get(name)
