"""Password hashing and session login for catalog users."""
import logging
from typing import Optional

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError
from fastapi import Request
from sqlalchemy import func
from sqlalchemy.orm import Session

from catalog.models.user import User

SESSION_USER_KEY = "user_id"
SESSION_INTENDED_KEY = "url.intended"

logger = logging.getLogger(__name__)

_hasher = PasswordHasher()


def hash_password(password: str) -> str:
    """Hash a plain-text password for storage."""
    return _hasher.hash(password)


def verify_password(hashed: str, password: str) -> bool:
    """Check a plain-text password against a stored hash."""
    try:
        return _hasher.verify(hashed, password)
    except (VerificationError, InvalidHashError):
        return False


def find_user_by_email(db: Session, email: str) -> Optional[User]:
    """Look up a user by email (case-insensitive)."""
    return db.query(User).filter(func.lower(User.email) == email.strip().lower()).first()


def create_user(db: Session, name: str, email: str, password: str) -> User:
    """Create a user with a hashed password."""
    user = User(name=name, email=email.strip().lower(), password=hash_password(password))
    db.add(user)
    db.commit()
    db.refresh(user)

    logger.info(f"Created user {user.id}: email='{user.email}'")
    return user


def authenticate(db: Session, email: str, password: str) -> Optional[User]:
    """
    Resolve credentials to a user.

    Rehashes the stored password when the hasher parameters have changed.

    Args:
        db: Database session
        email: Submitted email address
        password: Submitted plain-text password

    Returns:
        The matching user, or None if the credentials are wrong
    """
    user = find_user_by_email(db, email)
    if user is None or not verify_password(user.password, password):
        logger.info(f"Failed login attempt for '{email}'")
        return None

    if _hasher.check_needs_rehash(user.password):
        user.password = hash_password(password)
        db.commit()

    return user


def remember_intended_url(request: Request) -> None:
    """Remember where an unauthenticated visitor was heading."""
    url = request.url.path
    if request.url.query:
        url = f"{url}?{request.url.query}"
    request.session[SESSION_INTENDED_KEY] = url


def login(request: Request, user: User) -> Optional[str]:
    """
    Start an authenticated session.

    Returns:
        The URL the user originally asked for, if any
    """
    intended = request.session.get(SESSION_INTENDED_KEY)
    request.session.clear()
    request.session[SESSION_USER_KEY] = user.id

    logger.info(f"User {user.id} logged in")
    return intended


def logout(request: Request) -> None:
    """End the authenticated session."""
    user_id = request.session.get(SESSION_USER_KEY)
    request.session.clear()
    if user_id is not None:
        logger.info(f"User {user_id} logged out")
