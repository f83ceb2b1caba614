"""User aggregate: a shopper who can sign in and own orders."""

from datetime import UTC, datetime

from protean.fields import DateTime, String

from storefront.domain import storefront
from storefront.identity.email import EmailAddress
from storefront.identity.passwords import hash_password, verify_password


@storefront.aggregate
class User:
    """A registered shopper, identified by a system id and a unique email.

    The password is only ever held as a bcrypt hash. Orders point back at a
    User through their ``user_id`` field; the User does not track them.
    """

    email: String(required=True, max_length=254, unique=True)
    password_hash: String(required=True, max_length=255)
    registered_at: DateTime()

    @classmethod
    def register(cls, email, password):
        from storefront.identity.events import UserRegistered

        address = EmailAddress(address=(email or "").strip()).normalized
        now = datetime.now(UTC)

        user = cls(
            email=address,
            password_hash=hash_password(password),
            registered_at=now,
        )
        user.raise_(
            UserRegistered(
                user_id=user.id,
                email=address,
                registered_at=now,
            )
        )
        return user

    def check_password(self, password) -> bool:
        return verify_password(password, self.password_hash)
