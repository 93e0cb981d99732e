# shop.py
from __future__ import annotations

from typing import Optional

from directory import CustomerList, SupplierList
from inventory import Inventory
from utils import format_money


class ShopManager:
    """
    Front desk of the shop. Every method answers with a human-readable
    string; lookups that miss and rejected quantity changes are reported
    in the text rather than raised.
    """

    def __init__(self, inventory: Inventory, supplier_list: Optional[SupplierList] = None,
                 customer_list: Optional[CustomerList] = None, *, price_decimals: int = 2):
        self.inventory = inventory
        self.supplier_list = supplier_list if supplier_list is not None else SupplierList()
        self.customer_list = customer_list if customer_list is not None else CustomerList()
        self.price_decimals = price_decimals

    # -------------------------
    # Items
    # -------------------------
    def list_all_items(self) -> str:
        return str(self.inventory)

    def search_item_by_name(self, name: str) -> str:
        item = self.inventory.search_item_by_name(name)
        if item is None:
            return f"No item found with name '{name}'."
        return str(item)

    def search_item_by_id(self, item_id: int) -> str:
        item = self.inventory.search_item_by_id(item_id)
        if item is None:
            return f"No item found with id '{item_id}'."
        return str(item)

    def get_item_quantity(self, name: str) -> str:
        item = self.inventory.search_item_by_name(name)
        if item is None:
            return f"No item found with name '{name}'."
        return f"Item '{name}' - Current Quantity: {item.quantity}"

    def decrease_item_quantity(self, name: str, quantity: int) -> str:
        item = self.inventory.search_item_by_name(name)
        if item is None:
            return f"No item found with name '{name}'."
        if not 0 <= quantity <= item.quantity:
            return (f"Item '{name}' - Cannot decrease quantity by {quantity} "
                    f"(Current Quantity: {item.quantity})")
        self.inventory.manage_item(item, quantity)
        return f"Item '{name}' - Updated Quantity: {item.quantity}"

    def get_inventory_value(self) -> str:
        total = format_money(self.inventory.total_value(), decimals=self.price_decimals)
        return f"Total inventory value: {total}"

    def get_order(self) -> str:
        if self.inventory.order is None:
            return "No order exists"
        return str(self.inventory.order)

    # -------------------------
    # Suppliers
    # -------------------------
    def list_all_suppliers(self) -> str:
        if not len(self.supplier_list):
            return "No suppliers."
        return str(self.supplier_list)

    def search_supplier_by_id(self, supplier_id: int) -> str:
        supplier = self.supplier_list.search_by_id(supplier_id)
        if supplier is None:
            return f"No supplier found with id '{supplier_id}'."
        return str(supplier)

    # -------------------------
    # Customers
    # -------------------------
    def search_customer_by_id(self, customer_id: int) -> str:
        customer = self.customer_list.search_by_id(customer_id)
        if customer is None:
            return f"No customer found with id '{customer_id}'."
        return str(customer)

    def search_customers_by_last_name(self, last_name: str) -> str:
        found = self.customer_list.search_by_last_name(last_name)
        if not found:
            return f"No customer found with last name '{last_name}'."
        return "\n".join(str(c) for c in found)

    def list_customers_by_type(self, customer_type: str) -> str:
        found = self.customer_list.list_by_type(customer_type)
        if not found:
            return f"No customers of type '{customer_type}'."
        return "\n".join(str(c) for c in found)
