"""Utility helpers for web routes."""

from __future__ import annotations

from pathlib import Path, PurePath

from fastapi.responses import Response  # type: ignore[import-not-found]

from zennbook.content import PresentationContext
from zennbook.context import AppContext
from zennbook.json_utils import json_dumps

# Prefix of the route serving workspace files such as cover images.
FILES_PREFIX = "/files/"

# Context shared by all requests; created lazily from the environment.
_CONTEXT: AppContext | None = None


def get_context() -> AppContext:
    """Return the process wide application context."""

    global _CONTEXT
    if _CONTEXT is None:
        _CONTEXT = AppContext.from_env()
    return _CONTEXT


def relative_path(context: AppContext, uri: PurePath) -> str:
    """Return ``uri`` relative to the workspace root as a posix string.

    Paths outside the root are returned unchanged.
    """

    try:
        return uri.relative_to(context.root).as_posix()
    except ValueError:
        return uri.as_posix()


def presentation_context(context: AppContext) -> PresentationContext:
    """Return path mappers producing URLs served by this app.

    Cover images map to the ``/files`` route; book and chapter paths are
    reported relative to the workspace root.
    """

    return PresentationContext(
        asset_path=lambda uri: FILES_PREFIX + relative_path(context, uri),
        document_path=lambda uri: relative_path(context, uri),
    )


def resolve_workspace_file(context: AppContext, file_path: str) -> Path | None:
    """Locate a file inside the workspace root.

    Args:
        context: Application context whose root bounds the lookup.
        file_path: Path relative to the root, as received in a URL.

    Returns:
        The absolute file path, or ``None`` when it does not exist or lies
        outside the root.
    """

    root = Path(context.root).resolve()
    target = (root / file_path).resolve()
    if not target.is_relative_to(root) or not target.is_file():
        return None
    return target


def json_response(data: object) -> Response:
    """Return ``data`` serialized with ``json_dumps`` as a JSON response."""

    return Response(content=json_dumps(data), media_type="application/json")
