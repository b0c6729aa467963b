"""Request dependencies shared by the routers."""
import logging
from typing import Any, Dict

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from catalog.database import get_db
from catalog.exceptions import Unauthenticated
from catalog.models.user import User
from catalog.services.auth import SESSION_USER_KEY

logger = logging.getLogger(__name__)


def require_user(request: Request, db: Session = Depends(get_db)) -> User:
    """
    Resolve the authenticated user from the session.

    Raises:
        Unauthenticated: If the session has no user or the user is gone
    """
    user_id = request.session.get(SESSION_USER_KEY)
    user = db.get(User, user_id) if user_id is not None else None
    if user is None:
        logger.info(f"Rejected unauthenticated {request.method} {request.url.path}")
        raise Unauthenticated()

    request.state.user = user
    return user


async def read_input(request: Request) -> Dict[str, Any]:
    """
    Read submitted fields from a JSON body or a form post.

    Malformed or non-object JSON yields no fields, so validation reports
    the required ones as missing.
    """
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            data = await request.json()
        except ValueError:
            return {}
        return data if isinstance(data, dict) else {}

    form = await request.form()
    return {key: value for key, value in form.items()}
