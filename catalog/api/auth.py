"""Login and logout endpoints."""
from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from catalog.api.deps import read_input
from catalog.database import get_db
from catalog.exceptions import ValidationFailed
from catalog.schemas.auth import LoginForm
from catalog.services import auth, inertia
from catalog.services.validator import validate

router = APIRouter(tags=["auth"])

FAILED_LOGIN_MESSAGE = "These credentials do not match our records."


@router.get("/login", name="login")
def login_form(request: Request):
    """Show the login page, or skip it for an already signed-in user."""
    if request.session.get(auth.SESSION_USER_KEY) is not None:
        return inertia.redirect(request.app.url_path_for("products.index"))
    return inertia.render(request, "auth/Login")


@router.post("/login", name="login.attempt")
async def login(request: Request, db: Session = Depends(get_db)):
    """
    Sign in with email and password.

    On success the user is sent to the page they originally asked for.
    """
    login_url = request.app.url_path_for("login")
    try:
        credentials = validate(LoginForm, await read_input(request))
    except ValidationFailed as exc:
        return inertia.redirect_back(request, fallback=login_url, errors=exc.first_messages())

    user = auth.authenticate(db, credentials["email"], credentials["password"])
    if user is None:
        return inertia.redirect_back(
            request, fallback=login_url, errors={"email": FAILED_LOGIN_MESSAGE}
        )

    intended = auth.login(request, user)
    return inertia.redirect(intended or request.app.url_path_for("products.index"))


@router.post("/logout", name="logout")
def logout(request: Request):
    """Sign out and return to the login page."""
    auth.logout(request)
    return inertia.redirect(request.app.url_path_for("login"))
