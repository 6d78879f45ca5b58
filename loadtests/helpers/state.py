"""Per-user state tracking for Locust load test scenarios.

Each Locust user keeps its own state; nothing is shared between users except
the catalogue the staff journeys publish.
"""

from dataclasses import dataclass, field


@dataclass
class ShopperState:
    """A simulated customer's session."""

    headers: dict = field(default_factory=dict)
    address_id: str | None = None
    item_ids: list[str] = field(default_factory=list)
    order_ids: list[str] = field(default_factory=list)


@dataclass
class CatalogueState:
    """Variants a staff journey has published."""

    product_id: str | None = None
    variant_ids: list[str] = field(default_factory=list)
