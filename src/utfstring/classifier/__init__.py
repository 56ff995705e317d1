"""Logical-character classifiers and variant selection."""
from __future__ import annotations

from utfstring.classifier.classifier import (
    DEFAULT_CLASSIFIER,
    VISUAL_CLASSIFIER,
    CharClassifier,
    SurrogatePairClassifier,
    VisualClassifier,
)
from utfstring.classifier.registry import (
    ClassifierAlreadyRegisteredError,
    ClassifierNotFoundError,
    ClassifierRegistry,
    classifier_registry,
    get_classifier,
)

__all__ = [
    "CharClassifier",
    "SurrogatePairClassifier",
    "VisualClassifier",
    "DEFAULT_CLASSIFIER",
    "VISUAL_CLASSIFIER",
    "ClassifierRegistry",
    "ClassifierNotFoundError",
    "ClassifierAlreadyRegisteredError",
    "classifier_registry",
    "get_classifier",
]
