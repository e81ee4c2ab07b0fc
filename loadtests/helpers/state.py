"""Per-user state for the load scenarios.

Each Locust user keeps its own state; nothing is shared across users.
"""

from dataclasses import dataclass, field


@dataclass
class ShopperState:
    """Tracks the signed-in shopper and what it has created so far."""

    user_id: str | None = None
    token: str | None = None
    product_ids: list[str] = field(default_factory=list)
    order_id: str | None = None

    @property
    def headers(self) -> dict:
        return {"Authorization": f"Bearer {self.token}"} if self.token else {}
