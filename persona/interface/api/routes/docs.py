"""Protected API documentation routes."""

from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Request
from fastapi.openapi.docs import get_swagger_ui_html
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.security import HTTPBasicCredentials

from persona.interface.api.security import DocsAccessGuard, basic_auth
from persona.interface.api.voter import client_address

router = APIRouter(tags=["docs"], route_class=DishkaRoute, include_in_schema=False)


@router.get("/docs", response_class=HTMLResponse)
async def swagger_ui(
    request: Request,
    guard: FromDishka[DocsAccessGuard],
    credentials: Optional[HTTPBasicCredentials] = Depends(basic_auth),
) -> HTMLResponse:
    """Swagger UI, behind basic auth."""
    guard.authorize(client_address(request), credentials)
    return get_swagger_ui_html(
        openapi_url="/openapi.json", title=f"{request.app.title} - Docs"
    )


@router.get("/openapi.json")
async def openapi_schema(
    request: Request,
    guard: FromDishka[DocsAccessGuard],
    credentials: Optional[HTTPBasicCredentials] = Depends(basic_auth),
) -> JSONResponse:
    """OpenAPI schema, behind basic auth."""
    guard.authorize(client_address(request), credentials)
    return JSONResponse(request.app.openapi())
