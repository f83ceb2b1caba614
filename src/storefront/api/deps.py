"""Request dependencies: who is calling.

The session cookie only carries the user id; it is resolved against the
store on every request so a stale session cannot act for a missing user.
"""

from fastapi import HTTPException, Request, status

from storefront.identity.authentication import load_user
from storefront.identity.user import User
from storefront.utils.logging import add_context

SESSION_USER_KEY = "user_id"


async def current_user(request: Request) -> User:
    user_id = request.session.get(SESSION_USER_KEY)
    user = load_user(user_id) if user_id else None
    if user is None:
        request.session.pop(SESSION_USER_KEY, None)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="You must be logged in to do that.")
    add_context(user_id=str(user.id))
    return user


def sign_in(request: Request, user: User) -> None:
    request.session[SESSION_USER_KEY] = str(user.id)


def sign_out(request: Request) -> None:
    request.session.clear()
