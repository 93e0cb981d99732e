# models.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional

logger = logging.getLogger(__name__)

CUSTOMER_TYPES = ("R", "C")  # residential, commercial


@dataclass
class Item:
    id: int
    name: str
    quantity: int
    price: float
    type: str = ""
    supplier_id: Optional[int] = None

    def __post_init__(self) -> None:
        if self.quantity < 0:
            raise ValueError(f"Item {self.id}: quantity cannot be negative")
        if self.price < 0:
            raise ValueError(f"Item {self.id}: price cannot be negative")

    def __str__(self) -> str:
        return (f"Item - ID: {self.id}, Name: {self.name}, Quantity: {self.quantity}, "
                f"Price: {self.price}, Type: {self.type}")


@dataclass
class OrderLine:
    item: Item
    quantity: int

    def __str__(self) -> str:
        supplier = self.item.supplier_id if self.item.supplier_id is not None else "-"
        return (f"Item description:\t{self.item.name}\n"
                f"Amount ordered:\t\t{self.quantity}\n"
                f"Supplier ID:\t\t{supplier}")


@dataclass
class Order:
    id: int
    date: date
    lines: List[OrderLine] = field(default_factory=list)

    def add_line(self, line: OrderLine) -> None:
        self.lines.append(line)

    def has_line_for(self, item: Item) -> bool:
        return any(ln.item.id == item.id for ln in self.lines)

    def __str__(self) -> str:
        out = [f"ORDER ID:\t\t{self.id}", f"Date Ordered:\t\t{self.date.isoformat()}"]
        for ln in self.lines:
            out.append("")
            out.append(str(ln))
        return "\n".join(out)


@dataclass
class Supplier:
    id: int
    name: str
    address: str = ""
    contact: str = ""

    def __str__(self) -> str:
        return f"Supplier - ID: {self.id}, Name: {self.name}, Address: {self.address}, Contact: {self.contact}"


@dataclass
class Customer:
    id: int
    first_name: str
    last_name: str
    address: str = ""
    postal_code: str = ""
    phone: str = ""
    type: str = "R"

    def __post_init__(self) -> None:
        if self.type not in CUSTOMER_TYPES:
            raise ValueError(f"Customer {self.id}: type must be one of {', '.join(CUSTOMER_TYPES)}")

    def __str__(self) -> str:
        return (f"Customer - ID: {self.id}, Name: {self.first_name} {self.last_name}, "
                f"Address: {self.address}, Postal Code: {self.postal_code}, "
                f"Phone: {self.phone}, Type: {self.type}")


# -------------------------
# Item operations
# -------------------------
def decrease_quantity(item: Item, quantity_to_remove: int) -> int:
    if quantity_to_remove < 0:
        raise ValueError("Quantity to remove cannot be negative")
    if item.quantity - quantity_to_remove < 0:
        raise ValueError("Existing quantity is less than quantity to remove")
    item.quantity -= quantity_to_remove
    return item.quantity


def generate_order_line(item: Item, quantity_to_order: int) -> OrderLine:
    if quantity_to_order <= 0:
        raise ValueError("Quantity to order must be positive")
    logger.info("New order line was made.")
    return OrderLine(item=item, quantity=quantity_to_order)
