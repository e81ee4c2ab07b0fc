"""Storefront FastAPI application.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 3000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level, before the routers import the
# aggregates they serve.
from storefront.domain import storefront

storefront.init()

from storefront.api import create_app  # noqa: E402

app = create_app()
