"""Web interface routes implementation."""

from fastapi import APIRouter, Request, Form, HTTPException, status
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from shrtn.common.url_builder import build_redirect_location
from ..index_page import render_index

router = APIRouter()


def _path_prefix(request: Request) -> str:
    """Path prefix from X-Forwarded-Prefix, set by ForwardedHeadersMiddleware."""
    return getattr(request.state, "path_prefix", "")


@router.get("/", response_class=HTMLResponse)
async def index(request: Request):
    """List the most recent mappings under the submission form."""
    service = request.app.state.service

    mappings = await service.recent_mappings()

    return HTMLResponse(content=render_index(mappings, _path_prefix(request)))


@router.post("/new")
async def create_mapping(request: Request, longurl: str = Form("")):
    """Shorten the submitted URL and go back to the index."""
    service = request.app.state.service

    await service.create_mapping(longurl)

    return RedirectResponse(
        url=f"{_path_prefix(request)}/",
        status_code=status.HTTP_302_FOUND,
    )


@router.get("/s/{code:path}")
async def redirect_short_code(request: Request, code: str):
    """Redirect to the long URL stored for the code."""
    service = request.app.state.service

    mapping = await service.resolve(code)

    # Not RedirectResponse: it percent-quotes characters such as | { } ^ in the stored URL
    return Response(
        status_code=status.HTTP_302_FOUND,
        headers={"location": build_redirect_location(mapping.long_url)},
    )


@router.get("/health")
async def health_check(request: Request):
    """Health check endpoint (simple version for load balancers)."""
    service = request.app.state.service

    health = await service.health_check()

    if health["overall"]:
        return {"status": "healthy"}
    raise HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail="Service unhealthy",
    )
