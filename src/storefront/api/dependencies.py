"""FastAPI dependencies wiring the domain into request handlers.

Every request resolves a ``RequestContext`` from its ``Authorization`` header,
whether or not the operation needs a caller, and keeps it on
``request.state.context``. Operations that need a caller depend on
``require_user``, which turns an anonymous context into a 401.
"""

from fastapi import Depends, Header, Request
from protean.domain import Domain

from storefront.auth.gate import AuthGate, RequestContext
from storefront.auth.tokens import TokenCodec
from storefront.domain import storefront
from storefront.identity.user import User
from storefront.ordering.service import OrderService


def get_domain() -> Domain:
    return storefront


def get_token_codec() -> TokenCodec:
    return TokenCodec.from_environment()


def get_auth_gate(
    domain: Domain = Depends(get_domain),  # noqa: B008
    tokens: TokenCodec = Depends(get_token_codec),  # noqa: B008
) -> AuthGate:
    return AuthGate(domain, tokens)


def get_order_service(domain: Domain = Depends(get_domain)) -> OrderService:  # noqa: B008
    return OrderService(domain)


async def get_request_context(
    request: Request,
    authorization: str | None = Header(default=None),
    gate: AuthGate = Depends(get_auth_gate),  # noqa: B008
) -> RequestContext:
    context = gate.resolve_context(authorization)
    request.state.context = context
    return context


async def require_user(context: RequestContext = Depends(get_request_context)) -> User:  # noqa: B008
    return context.require_user()
