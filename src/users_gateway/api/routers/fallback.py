"""Catch-all endpoint for requests no other route handles.

Registered without a method list so every HTTP method reaches it. A path with
a trailing slash is redirected to its slash-less form, which lets ``/users/``
and ``/users/{id}/`` reach the users routes.
"""

from fastapi import HTTPException, Request, status
from fastapi.responses import RedirectResponse, Response

FALLBACK_PATH = "/{path:path}"


async def not_found(request: Request) -> Response:
    path = request.url.path
    if len(path) > 1 and path.endswith("/"):
        target = request.url.replace(path=path.rstrip("/") or "/")
        return RedirectResponse(
            url=str(target), status_code=status.HTTP_307_TEMPORARY_REDIRECT
        )
    raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not found")
