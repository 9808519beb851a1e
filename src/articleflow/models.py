"""Shared data models for articleflow."""

from dataclasses import dataclass, field
from enum import Enum


class FailureKind(str, Enum):
    """Discriminant carried by every stage failure."""

    STORE_CONNECTION = "store_connection"
    STORE_CREATE = "store_create"
    FILE_SYSTEM = "file_system"


class StoreError(Exception):
    """Raised (or passed to a callback) when the mock store reports a failure."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)


class StageError(Exception):
    """A failure tagged with the stage that produced it.

    Args:
        kind: Which stage failed.
        cause: The underlying error reported by the store or the file system.
    """

    def __init__(self, kind: FailureKind, cause: BaseException) -> None:
        self.kind = kind
        self.cause = cause
        super().__init__(f"{kind.value}: {cause}")


@dataclass
class Article:
    """Represents an article record bound for the store."""

    source_file_name: str
    title: str
    body: str
    tags: list[str] = field(default_factory=list)
    generated_id: str | None = None

    @property
    def is_created(self) -> bool:
        """Check if the store has accepted the record and assigned it an id."""
        return self.generated_id is not None
