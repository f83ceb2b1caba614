"""Repository for the User aggregate."""

from storefront.domain import storefront
from storefront.identity.user import User


@storefront.repository(part_of=User)
class UserRepository:
    def find_by_email(self, email: str) -> User | None:
        """Look a user up by normalized email, or None."""
        results = self._dao.query.filter(email=email.strip().lower()).all()
        return results.first
