"""Credential checks for sign-in.

The HTTP layer keeps the resulting user id in the session; nothing here knows
about cookies.
"""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.identity.user import User
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class InvalidCredentials(Exception):
    """Email unknown or password wrong; the message does not say which."""


def authenticate(email: str, password: str) -> User:
    """Return the user owning ``email`` if ``password`` matches."""
    user = current_domain.repository_for(User).find_by_email(email or "")
    if user is None or not user.check_password(password):
        logger.info("auth.login_rejected")
        raise InvalidCredentials("Incorrect email or password.")
    return user


def load_user(user_id: str) -> User | None:
    """Resolve a session's user id, or None when the user no longer exists."""
    try:
        return current_domain.repository_for(User).get(user_id)
    except ObjectNotFoundError:
        return None
