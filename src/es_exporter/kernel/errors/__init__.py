"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── CatalogError                 (catalog.py)
    │   ├── MetricRedefinitionError
    │   ├── UnknownMetricError
    │   ├── LabelArityError
    │   ├── MetricKindError
    │   └── TimerAlreadyObservedError
    └── CollectionError              (collection.py)
        ├── StatSourceUnavailable
        └── CollaboratorFailure
            └── CollaboratorTimeoutError

Configuration errors live in :mod:`es_exporter.config.validation`.
"""

from es_exporter.kernel.errors.base import BaseError
from es_exporter.kernel.errors.catalog import (
    CatalogError,
    LabelArityError,
    MetricKindError,
    MetricRedefinitionError,
    TimerAlreadyObservedError,
    UnknownMetricError,
)
from es_exporter.kernel.errors.collection import (
    CollaboratorFailure,
    CollaboratorTimeoutError,
    CollectionError,
    StatSourceUnavailable,
)

__all__ = [
    "BaseError",
    "CatalogError",
    "CollaboratorFailure",
    "CollaboratorTimeoutError",
    "CollectionError",
    "LabelArityError",
    "MetricKindError",
    "MetricRedefinitionError",
    "StatSourceUnavailable",
    "TimerAlreadyObservedError",
    "UnknownMetricError",
]
