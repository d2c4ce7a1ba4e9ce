"""Collection errors – stat-source failures, I/O with Elasticsearch."""

from __future__ import annotations

from typing import Any

from es_exporter.kernel.errors.base import BaseError


class CollectionError(BaseError):
    """Fetching a statistics snapshot went wrong."""

    default_code = "collection_error"


class StatSourceUnavailable(CollectionError):
    """A snapshot section is absent for this cycle.

    Not fatal: the pipeline skips the affected mappings and keeps the values
    the catalog already holds.
    """

    default_code = "stat_source_unavailable"

    def __init__(self, section: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(message or f"Stat section '{section}' is unavailable", **kwargs)
        self.section = section


class CollaboratorFailure(CollectionError):
    """The stat-source call itself failed; propagated to the cycle's caller."""

    default_code = "collaborator_failure"

    def __init__(
        self,
        source: str,
        message: str | None = None,
        *,
        status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Stat source '{source}' failed", **kwargs)
        self.source = source
        self.status_code = status_code


class CollaboratorTimeoutError(CollaboratorFailure):
    """The stat-source call exceeded its deadline."""

    default_code = "collaborator_timeout"


__all__ = [
    "CollaboratorFailure",
    "CollaboratorTimeoutError",
    "CollectionError",
    "StatSourceUnavailable",
]
