"""
Order reconciler.

Overlays the provider's live order state on a locally cached order.
A failed live fetch, or a live view that cannot be merged, is not an
error for the caller: the cached record is returned as-is and the
failure is logged.
"""

import logging
from typing import Awaitable, Callable, Optional, Union

from payment_provider.models import ProviderOrderView

from ..core.errors import OrderNotFoundError
from ..models.order import OrderRecord, OrderView

logger = logging.getLogger(__name__)

LiveFetch = Callable[[], Awaitable[ProviderOrderView]]


def merge_order_view(local: OrderRecord, live: ProviderOrderView) -> OrderView:
    """Stable fields from the cache, volatile fields from the provider"""
    return OrderView(
        **local.model_dump(exclude={"status"}),
        status=live.status,
        fraud_status=live.fraud_status,
        expires_at=live.expires_at,
        captures=live.captures,
        refunds=live.refunds,
    )


async def reconcile(
    local: Optional[OrderRecord],
    live_fetch: LiveFetch,
    order_id: Optional[str] = None,
) -> Union[OrderRecord, OrderView]:
    """
    Merge a cached order with the provider's current view of it.

    Args:
        local: Cached order, or None if the id is unknown
        live_fetch: Coroutine factory fetching the provider's order view
        order_id: Requested id, reported when there is no cached order

    Returns:
        Merged OrderView, or the cached record unchanged if the fetch or
        merge failed

    Raises:
        OrderNotFoundError: If there is no cached order; the provider is
            not contacted in that case
    """
    if local is None:
        raise OrderNotFoundError(order_id or "")

    try:
        live = await live_fetch()
        view = merge_order_view(local, live)
    except Exception as e:
        logger.warning(
            f"Could not reconcile order {local.order_id} with provider, "
            f"returning cached data: {e!r}"
        )
        return local

    logger.debug(f"Order {local.order_id} reconciled, provider status {view.status}")
    return view
