"""Signed credential tokens.

A token is an HS256 JWT whose only claim is ``userId``. There is no expiry:
verification checks the signature and the presence of the claim, nothing else.
"""

from jose import JWTError, jwt

from storefront.config import get_jwt_algorithm, get_jwt_secret
from storefront.exceptions import InvalidTokenError


class TokenCodec:
    def __init__(self, secret: str, algorithm: str = "HS256"):
        self.secret = secret
        self.algorithm = algorithm

    @classmethod
    def from_environment(cls) -> "TokenCodec":
        return cls(secret=get_jwt_secret(), algorithm=get_jwt_algorithm())

    def issue(self, user_id) -> str:
        return jwt.encode({"userId": str(user_id)}, self.secret, algorithm=self.algorithm)

    def decode(self, token: str) -> str:
        """Return the user id bound to ``token``."""
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except JWTError as exc:
            raise InvalidTokenError(f"Invalid token: {exc}") from exc

        user_id = payload.get("userId")
        if not user_id:
            raise InvalidTokenError("Token carries no user id")
        return str(user_id)
