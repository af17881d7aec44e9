"""Per-user state for Locust scenarios. Each simulated user tracks its own ids."""

from dataclasses import dataclass, field


@dataclass
class OrderDeskState:
    customer_id: str | None = None
    product_ids: list[str] = field(default_factory=list)
    order_id: str | None = None
