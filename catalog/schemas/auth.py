"""Login form schema."""
from typing import Annotated

from pydantic import BaseModel, StrictStr, StringConstraints


class LoginForm(BaseModel):
    """Credentials submitted to the login page."""

    email: Annotated[
        StrictStr, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)
    ]
    password: Annotated[StrictStr, StringConstraints(min_length=1)]
