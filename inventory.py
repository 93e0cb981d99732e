# inventory.py
from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, Iterator, List, Optional

from models import Item, Order, decrease_quantity, generate_order_line
from utils import now_str, new_id, new_order_id

logger = logging.getLogger(__name__)

DEFAULT_RESTOCK_THRESHOLD = 40
DEFAULT_RESTOCK_TARGET = 50


class Inventory:
    """
    Items for sale plus at most one in-flight restock order.

    Every decrease made through manage_item() is kept as a movement record
    so stock history can be reported or plotted later.
    """

    def __init__(self, items: Optional[List[Item]] = None, *,
                 restock_threshold: int = DEFAULT_RESTOCK_THRESHOLD,
                 restock_target: int = DEFAULT_RESTOCK_TARGET):
        if restock_target < restock_threshold:
            raise ValueError("Restock target cannot be below the restock threshold")
        self.items: List[Item] = []
        self.order: Optional[Order] = None
        self.movements: List[Dict[str, Any]] = []
        self.restock_threshold = restock_threshold
        self.restock_target = restock_target
        for it in items or []:
            self.add_item(it)

    # -------------------------
    # Read helpers
    # -------------------------
    def search_item_by_name(self, name: str) -> Optional[Item]:
        for it in self.items:
            if it.name == name:
                return it
        return None

    def search_item_by_id(self, item_id: int) -> Optional[Item]:
        for it in self.items:
            if it.id == item_id:
                return it
        return None

    def total_value(self) -> float:
        return sum(it.quantity * it.price for it in self.items)

    def list_movements(self, item_id: Optional[int] = None) -> List[Dict[str, Any]]:
        out = [r for r in self.movements if item_id is None or r["item_id"] == item_id]
        out.sort(key=lambda x: x.get("ts", ""))
        return out

    # -------------------------
    # Mutations
    # -------------------------
    def add_item(self, item: Item) -> None:
        if self.search_item_by_id(item.id) is not None:
            raise ValueError(f"Duplicate item id: {item.id}")
        self.items.append(item)

    def manage_item(self, item: Item, quantity: int) -> int:
        remaining = decrease_quantity(item, quantity)
        self.movements.append({
            "id": new_id("MV"),
            "ts": now_str(),
            "item_id": item.id,
            "qty": quantity,
            "quantity_after": remaining,
        })
        logger.debug("Item %s decreased by %s, %s left", item.id, quantity, remaining)

        if remaining < self.restock_threshold:
            self._restock(item)
        return remaining

    def _restock(self, item: Item) -> None:
        if self.order is not None and self.order.has_line_for(item):
            return
        line = generate_order_line(item, self.restock_target - item.quantity)
        if self.order is None:
            self.order = Order(id=new_order_id(), date=date.today())
            logger.info("Started order %s", self.order.id)
        self.order.add_line(line)

    # -------------------------
    # Reporting
    # -------------------------
    def __iter__(self) -> Iterator[Item]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __str__(self) -> str:
        if not self.items:
            return "No items in inventory."
        return "\n".join(str(it) for it in self.items)
