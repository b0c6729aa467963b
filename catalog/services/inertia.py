"""Server side of the Inertia protocol.

Handlers name a client component and hand over its props; this module wraps
them in a page object (``component``, ``props``, ``url``, ``version``) and
returns it as JSON for Inertia visits or embedded in the HTML shell for full
page loads. It also owns the one-shot session values (flash message and
validation errors) that survive exactly one redirect.
"""
import logging
from pathlib import Path
from typing import Any, Dict, Optional
from urllib.parse import urlparse

from fastapi import Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from starlette.middleware.base import BaseHTTPMiddleware

from catalog.config import get_settings

FLASH_KEY = "_flash"

settings = get_settings()
logger = logging.getLogger(__name__)

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))


def is_inertia(request: Request) -> bool:
    """Whether the request was made by the Inertia client."""
    return request.headers.get("X-Inertia", "").lower() == "true"


def flash(request: Request, key: str, value: Any) -> None:
    """Store a value for the next render only."""
    bag = dict(request.session.get(FLASH_KEY, {}))
    bag[key] = value
    request.session[FLASH_KEY] = bag


def pull_flash(request: Request, key: str, default: Any = None) -> Any:
    """Read a flashed value and drop it from the session."""
    bag = dict(request.session.get(FLASH_KEY, {}))
    value = bag.pop(key, default)
    if bag:
        request.session[FLASH_KEY] = bag
    else:
        request.session.pop(FLASH_KEY, None)
    return value


def shared_props(request: Request) -> Dict[str, Any]:
    """
    Props merged into every page.

    Reading them consumes the pending flash message and validation errors.
    """
    user = getattr(request.state, "user", None)
    return {
        "errors": pull_flash(request, "errors", {}),
        "flash": {"message": pull_flash(request, "message")},
        "auth": {
            "user": (
                {"id": user.id, "name": user.name, "email": user.email}
                if user is not None
                else None
            )
        },
    }


def _page_url(request: Request) -> str:
    url = request.url.path
    if request.url.query:
        url = f"{url}?{request.url.query}"
    return url


def render(
    request: Request, component: str, props: Optional[Dict[str, Any]] = None
) -> Response:
    """
    Render a client component.

    Args:
        request: Current request
        component: Component name, e.g. "products/Index"
        props: Page-specific props; pydantic models are serialized

    Returns:
        JSON page object for Inertia visits, HTML shell otherwise
    """
    page = jsonable_encoder(
        {
            "component": component,
            "props": {**shared_props(request), **(props or {})},
            "url": _page_url(request),
            "version": settings.inertia_version,
        }
    )

    if is_inertia(request):
        return JSONResponse(page, headers={"X-Inertia": "true", "Vary": "X-Inertia"})

    return templates.TemplateResponse(
        request, "app.html", {"page": page}, headers={"Vary": "X-Inertia"}
    )


def redirect(url: str) -> RedirectResponse:
    """Redirect after a request; the middleware upgrades it to 303 where needed."""
    return RedirectResponse(url=url, status_code=302)


def previous_url(request: Request, fallback: str) -> str:
    """
    The referring page when it belongs to this application, else ``fallback``.

    Accepts an absolute URL with this request's scheme and host, or a path
    starting with a single slash.
    """
    referer = request.headers.get("referer")
    if not referer:
        return fallback

    parsed = urlparse(referer)
    if parsed.scheme or parsed.netloc:
        if parsed.scheme == request.url.scheme and parsed.netloc == request.url.netloc:
            return referer
        return fallback

    if referer.startswith("/") and not referer.startswith(("//", "/\\")):
        return referer
    return fallback


def redirect_back(
    request: Request, fallback: str, errors: Optional[Dict[str, str]] = None
) -> RedirectResponse:
    """
    Redirect to the submitting page, carrying validation errors for one render.

    Args:
        request: Current request
        fallback: Where to go when there is no usable Referer
        errors: Field name to message mapping shown beside the form inputs
    """
    if errors:
        flash(request, "errors", errors)
    return redirect(previous_url(request, fallback))


class InertiaMiddleware(BaseHTTPMiddleware):
    """Asset version check and redirect status handling for Inertia visits."""

    async def dispatch(self, request: Request, call_next):
        if (
            request.method == "GET"
            and is_inertia(request)
            and request.headers.get("X-Inertia-Version", settings.inertia_version)
            != settings.inertia_version
        ):
            # Client assets are stale; force a full page visit
            logger.info(f"Asset version mismatch on {request.url.path}, forcing reload")
            return Response(
                status_code=409, headers={"X-Inertia-Location": str(request.url)}
            )

        response = await call_next(request)

        # A 302 after PUT/PATCH/DELETE would be replayed with the same method
        if response.status_code == 302 and request.method in ("PUT", "PATCH", "DELETE"):
            response.status_code = 303

        return response
