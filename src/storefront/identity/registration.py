"""User registration: command and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.identity.user import User
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="User")
class RegisterUser:
    """Create a shopper account from an email and a plain-text password."""

    email: String(required=True, max_length=254)
    password: String(required=True, max_length=255)


@storefront.command_handler(part_of=User)
class RegisterUserHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        repo = current_domain.repository_for(User)

        if repo.find_by_email(command.email) is not None:
            raise ValidationError({"email": ["User with that email already exists."]})

        user = User.register(email=command.email, password=command.password)
        repo.add(user)

        logger.info("user.registered", user_id=str(user.id))
        return str(user.id)
