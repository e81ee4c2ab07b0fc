"""User aggregate and its repository.

Users are created by sign-up and are not changed or deleted afterwards. The
password is kept exactly as supplied and compared by literal equality.
"""

from datetime import UTC, datetime

from protean.fields import DateTime, String

from storefront.domain import storefront


@storefront.aggregate
class User:
    """A person who can sign in and place orders."""

    name: String(required=True, max_length=255)
    email: String(required=True, max_length=254, unique=True)
    password: String(required=True, max_length=255)
    created_at: DateTime(default=lambda: datetime.now(UTC))

    @classmethod
    def sign_up(cls, name, email, password):
        from storefront.identity.events import UserSignedUp

        now = datetime.now(UTC)
        user = cls(name=name, email=email, password=password, created_at=now)
        user.raise_(
            UserSignedUp(
                user_id=user.id,
                name=name,
                email=email,
                signed_up_at=now,
            )
        )
        return user

    def password_matches(self, password) -> bool:
        return self.password == password


@storefront.repository(part_of=User)
class UserRepository:
    def find_by_email(self, email: str) -> User | None:
        return self._dao.query.filter(email=email).all().first

    def find_many(self, user_ids) -> dict[str, User]:
        """Look up several users at once, keyed by id. Unknown ids are left out."""
        ids = list({str(user_id) for user_id in user_ids})
        if not ids:
            return {}
        users = self._dao.query.filter(id__in=ids).limit(None).all().items
        return {str(user.id): user for user in users}
