"""
Proxy pattern: a book keeper stands in front of a slow stock keeper and
caches the stock count after the first lookup.
"""

import asyncio
import logging
from typing import Callable, Optional

from pattern_catalog.core.config_manager import config_manager

logger = logging.getLogger(__name__)

InventoryCallback = Callable[[int], None]


class StockKeeper:
    """Counts stock the slow way."""

    def __init__(self, stock: Optional[int] = None, delay: Optional[float] = None) -> None:
        proxy_settings = config_manager.get_proxy_settings()
        self.stock = proxy_settings["stock_count"] if stock is None else stock
        self.delay = proxy_settings["stock_count_delay"] if delay is None else delay
        self.counts_performed = 0

    async def count_stock(self) -> int:
        self.counts_performed += 1
        logger.info(f"Counting stock, this takes {self.delay}s")
        await asyncio.sleep(self.delay)
        return self.stock


class BookKeeper:
    """
    Caching proxy for `StockKeeper.count_stock`.

    With `single_flight` enabled, callers arriving while the first count is
    still running wait on that same count instead of starting their own.
    """

    def __init__(
        self,
        stock_keeper: Optional[StockKeeper] = None,
        single_flight: Optional[bool] = None,
    ) -> None:
        self.stock_keeper = stock_keeper or StockKeeper()
        if single_flight is None:
            single_flight = config_manager.get_proxy_settings()["single_flight_inventory"]
        self.single_flight = single_flight
        self._inventory: Optional[int] = None
        self._pending: Optional[asyncio.Future] = None

    @property
    def cached_inventory(self) -> Optional[int]:
        return self._inventory

    async def _count(self) -> int:
        if not self.single_flight:
            return await self.stock_keeper.count_stock()

        if self._pending is None:
            pending = asyncio.ensure_future(self.stock_keeper.count_stock())
            pending.add_done_callback(self._count_finished)
            self._pending = pending
        # Cancelling one waiter must not cancel the count the others share
        return await asyncio.shield(self._pending)

    def _count_finished(self, task: asyncio.Future) -> None:
        if self._pending is task:
            self._pending = None
        if task.cancelled() or task.exception() is not None:
            return
        if self._inventory is None:
            self._inventory = task.result()
            logger.debug(f"Cached inventory of {self._inventory}")

    async def get_inventory(self, callback: Optional[InventoryCallback] = None) -> int:
        """
        Get the stock count, counting it only if it has not been cached yet.

        Args:
            callback: Called exactly once with the stock count

        Returns:
            The stock count
        """
        if self._inventory is None:
            inventory = await self._count()
            if self._inventory is None:
                self._inventory = inventory
                logger.debug(f"Cached inventory of {inventory}")
        else:
            logger.debug("Serving inventory from cache")

        if callback is not None:
            callback(self._inventory)
        return self._inventory
