"""OpenAPI description and its HTML viewer."""

from __future__ import annotations

import yaml
from fastapi import APIRouter, Request
from fastapi.openapi.docs import get_swagger_ui_html
from fastapi.responses import HTMLResponse, Response

OPENAPI_YAML_PATH = "/openapi.yaml"

router = APIRouter(include_in_schema=False)


@router.get(OPENAPI_YAML_PATH)
def read_openapi_yaml(request: Request) -> Response:
    """Serve the generated OpenAPI document as YAML."""

    document = request.app.openapi()
    content = yaml.safe_dump(document, sort_keys=False, allow_unicode=True)
    return Response(content=content, media_type="application/yaml")


@router.get("/docs")
def read_docs(request: Request) -> HTMLResponse:
    """Render Swagger UI pointed at the YAML description."""

    return get_swagger_ui_html(
        openapi_url=OPENAPI_YAML_PATH, title=f"{request.app.title} - Docs"
    )
