"""Failure value returned by content loaders."""

from __future__ import annotations

import enum
from pathlib import PurePath
from typing import Any, TypeGuard

from attrs import define, field


class ErrorKind(enum.Enum):
    """Reason a content unit could not be resolved."""

    MISSING_CONFIG = "missing_config"
    READ_FAILURE = "read_failure"


class MissingConfigError(LookupError):
    """Raised while loading a book directory that has no config file."""


@define(slots=True, eq=False)
class ContentError(Exception):
    """A content unit that failed to resolve.

    Loaders return instances instead of raising them so that callers can
    cache and display the failure next to successful results. Callers that
    cannot continue without the content may still ``raise`` it.

    Attributes:
        message: Human readable description of the failure.
        uri: Resource the failure originates from.
        kind: Category of the failure.
    """

    message: str
    uri: PurePath
    kind: ErrorKind = field(default=ErrorKind.READ_FAILURE)

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON friendly representation of the error."""

        return {
            "type": "error",
            "message": self.message,
            "path": self.uri.as_posix(),
            "kind": self.kind.value,
        }


def is_error(value: object) -> TypeGuard[ContentError]:
    """Return ``True`` when ``value`` is a ``ContentError``."""

    return isinstance(value, ContentError)
