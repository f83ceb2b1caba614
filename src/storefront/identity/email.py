"""EmailAddress value object for validated email addresses."""

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import String

from storefront.domain import storefront

_FORBIDDEN_CHARACTERS = (";", ",", "(", ")", '"', ":", "<", ">", "[", "]", "\\")


def _invalid(email):
    return ValidationError({"email": [f"Invalid email address: {email!r}"]})


@storefront.value_object
class EmailAddress:
    """A structurally valid email address.

    Exactly one @, non-empty local and domain parts, a dotted domain, no
    whitespace, no consecutive dots and none of the characters that would need
    quoting. Addresses are compared case-insensitively, so ``normalized`` is
    what gets stored on a User.
    """

    address: String(required=True, max_length=254)

    @property
    def normalized(self) -> str:
        return self.address.strip().lower()

    @invariant.post
    def verify_email_address(self):
        email = self.address

        if any(ch in email for ch in (" ", "\t", "\n")):
            raise _invalid(email)

        if email.count("@") != 1:
            raise _invalid(email)

        local_part, domain_part = email.split("@", 1)

        if not local_part or local_part.startswith(".") or local_part.endswith("."):
            raise _invalid(email)

        if not domain_part or domain_part.startswith(".") or domain_part.endswith("."):
            raise _invalid(email)

        if "." not in domain_part:
            raise _invalid(email)

        for label in domain_part.split("."):
            if label.startswith("-") or label.endswith("-"):
                raise _invalid(email)

        if ".." in email:
            raise _invalid(email)

        if any(ch in email for ch in _FORBIDDEN_CHARACTERS):
            raise _invalid(email)
