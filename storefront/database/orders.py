"""Order storage for the storefront"""

import threading
from typing import Optional

from ..core.errors import OrderNotFoundError
from ..models.order import OrderRecord


class OrderStore:
    """
    In-memory order cache keyed by provider order id.

    Filled only after the provider confirms an order. Entries live for the
    process lifetime. A single lock makes each write atomic with respect
    to reads, so handlers running on different threads never see a
    half-inserted record.
    """

    def __init__(self):
        self._orders: dict[str, OrderRecord] = {}
        self._lock = threading.Lock()

    def put_order(self, record: OrderRecord) -> None:
        """Store an order, replacing any record under the same id"""
        with self._lock:
            # Re-inserting moves the id to the end of insertion order
            self._orders.pop(record.order_id, None)
            self._orders[record.order_id] = record

    def find_order(self, order_id: str) -> Optional[OrderRecord]:
        """Get an order by ID, or None"""
        with self._lock:
            return self._orders.get(order_id)

    def get_order(self, order_id: str) -> OrderRecord:
        """Get an order by ID, raising OrderNotFoundError if absent"""
        order = self.find_order(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)
        return order

    def list_orders(self, limit: Optional[int] = None) -> list[OrderRecord]:
        """List orders, most recent first"""
        with self._lock:
            orders = list(reversed(self._orders.values()))
        # Stable sort: equal timestamps stay latest-inserted first
        orders.sort(key=lambda o: o.created_at, reverse=True)
        if limit is not None:
            return orders[:limit]
        return orders

    def __len__(self) -> int:
        with self._lock:
            return len(self._orders)
