"""FastAPI application entry point."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.middleware.sessions import SessionMiddleware

from catalog.api.auth import router as auth_router
from catalog.api.products import router as products_router
from catalog.config import get_settings
from catalog.database import engine, Base
from catalog.exceptions import NotFound, Unauthenticated
from catalog.models import Product, User  # noqa: F401 - Import to register models
from catalog.services import inertia
from catalog.services.auth import remember_intended_url

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler()],
)

# Set specific log levels for noisy libraries
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create database tables on startup."""
    Base.metadata.create_all(bind=engine)
    logger.info(f"Catalog started (env={settings.app_env})")
    yield


app = FastAPI(
    title="Product Catalog",
    description="Manage a product catalog through server-driven pages",
    version="0.1.0",
    lifespan=lifespan,
)

# Last added runs first: sessions must wrap the Inertia handling
app.add_middleware(inertia.InertiaMiddleware)
app.add_middleware(
    SessionMiddleware,
    secret_key=settings.secret_key,
    session_cookie=settings.session_cookie,
    max_age=settings.session_max_age,
    same_site="lax",
    https_only=settings.app_env == "production",
)

# Include routers
app.include_router(auth_router)
app.include_router(products_router)


@app.exception_handler(Unauthenticated)
async def unauthenticated_handler(request: Request, exc: Unauthenticated):
    """Send guests to the login page, remembering where they were going."""
    if request.method == "GET":
        remember_intended_url(request)
    return inertia.redirect(app.url_path_for("login"))


@app.exception_handler(NotFound)
async def not_found_handler(request: Request, exc: NotFound):
    """Unknown identifiers are a 404, never a silent no-op."""
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/")
async def root():
    """Redirect to the product list."""
    return inertia.redirect(app.url_path_for("products.index"))
