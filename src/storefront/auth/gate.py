"""Auth gate: sign-up, sign-in and per-request identity resolution.

``resolve_context`` never fails: a missing, malformed or forged credential, or
one bound to a user that no longer exists, yields an anonymous context.
Operations that need a caller call ``RequestContext.require_user``.

Passwords are stored as given and compared by literal equality.
"""

from dataclasses import dataclass

import structlog
from protean.domain import Domain
from protean.exceptions import ObjectNotFoundError, ValidationError

from storefront.auth.tokens import TokenCodec
from storefront.exceptions import ConflictError, InvalidTokenError, UnauthorizedError
from storefront.identity.user import User

logger = structlog.get_logger(__name__)

_BEARER_PREFIX = "bearer "


@dataclass(frozen=True)
class RequestContext:
    user: User | None = None

    @classmethod
    def anonymous(cls) -> "RequestContext":
        return cls(user=None)

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    def require_user(self) -> User:
        if self.user is None:
            raise UnauthorizedError("Authentication required")
        return self.user


@dataclass(frozen=True)
class AuthResult:
    user_id: str
    token: str
    message: str | None = None


class AuthGate:
    def __init__(self, domain: Domain, tokens: TokenCodec):
        self.domain = domain
        self.tokens = tokens

    @property
    def users(self):
        return self.domain.repository_for(User)

    def sign_up(self, name: str, email: str, password: str) -> AuthResult:
        if self.users.find_by_email(email) is not None:
            raise ConflictError("User already exists")

        user = User.sign_up(name=name, email=email, password=password)
        self.users.add(user)

        logger.info("User signed up", user_id=str(user.id))
        return AuthResult(
            user_id=str(user.id),
            token=self.tokens.issue(user.id),
            message="User Created",
        )

    def sign_in(self, email: str, password: str) -> AuthResult:
        user = self.users.find_by_email(email)
        if user is None or not user.password_matches(password):
            logger.info("Sign-in rejected")
            raise UnauthorizedError("Invalid email or password")

        logger.info("User signed in", user_id=str(user.id))
        return AuthResult(user_id=str(user.id), token=self.tokens.issue(user.id))

    def sign_out(self) -> bool:
        # Tokens are stateless; there is no server-side session to end.
        return True

    def resolve_context(self, credential: str | None) -> RequestContext:
        token = _strip_bearer(credential)
        if not token:
            return RequestContext.anonymous()

        try:
            user_id = self.tokens.decode(token)
            user = self.users.get(user_id)
        except (InvalidTokenError, ObjectNotFoundError, ValidationError) as exc:
            logger.debug("Credential not accepted, continuing anonymously", reason=str(exc))
            return RequestContext.anonymous()

        return RequestContext(user=user)


def _strip_bearer(credential: str | None) -> str:
    if not credential:
        return ""
    credential = credential.strip()
    if credential.lower().startswith(_BEARER_PREFIX):
        return credential[len(_BEARER_PREFIX) :].strip()
    return credential
