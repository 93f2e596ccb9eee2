"""FastAPI application serving book listings and previews."""

from __future__ import annotations

from fastapi import (  # type: ignore[import-not-found]
    FastAPI,
    HTTPException,
    Query,
)
from fastapi.responses import (  # type: ignore[import-not-found]
    FileResponse,
    Response,
)

from zennbook.content import (
    ContentError,
    book_summary,
    load_book_contents,
    load_book_preview_content,
)

from . import utils

app = FastAPI()


@app.get("/books")
async def list_books(force: bool = Query(default=False)) -> Response:
    """List every book of the workspace.

    Args:
        force: Reload books instead of using cached results.

    Returns:
        JSON list with one entry per book directory. Books that failed to
        load are reported with ``type`` set to ``"error"``.
    """

    context = utils.get_context()
    try:
        results = await load_book_contents(context, force)
    except OSError as exc:
        raise HTTPException(
            status_code=404, detail="Books folder not found"
        ) from exc

    return utils.json_response([book_summary(r) for r in results])


@app.get("/books/{name}/preview")
async def preview_book(
    name: str, force: bool = Query(default=False)
) -> Response:
    """Return the preview document of a book.

    Args:
        name: Directory name of the book.
        force: Reload the book and its chapters before rendering.

    Returns:
        The preview document as JSON.
    """

    context = utils.get_context()
    uri = context.books_folder / name

    try:
        doc = await load_book_preview_content(
            context, uri, utils.presentation_context(context), force
        )
    except ContentError as exc:
        raise HTTPException(status_code=422, detail=exc.message) from exc

    return utils.json_response(doc.to_dict())


@app.get("/files/{file_path:path}")
async def workspace_file(file_path: str) -> FileResponse:
    """Serve a file from the workspace, such as a book cover.

    Args:
        file_path: Path relative to the workspace root.

    Returns:
        The file contents.
    """

    target = utils.resolve_workspace_file(utils.get_context(), file_path)
    if target is None:
        raise HTTPException(status_code=404, detail="File not found")
    return FileResponse(target)
