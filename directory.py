# directory.py
from __future__ import annotations

from typing import Iterator, List, Optional

from models import Customer, Supplier


class SupplierList:
    def __init__(self, suppliers: Optional[List[Supplier]] = None):
        self.suppliers: List[Supplier] = []
        for s in suppliers or []:
            self.add(s)

    def add(self, supplier: Supplier) -> None:
        if self.search_by_id(supplier.id) is not None:
            raise ValueError(f"Duplicate supplier id: {supplier.id}")
        self.suppliers.append(supplier)

    def search_by_id(self, supplier_id: int) -> Optional[Supplier]:
        for s in self.suppliers:
            if s.id == supplier_id:
                return s
        return None

    def __iter__(self) -> Iterator[Supplier]:
        return iter(self.suppliers)

    def __len__(self) -> int:
        return len(self.suppliers)

    def __str__(self) -> str:
        return "\n".join(str(s) for s in self.suppliers)


class CustomerList:
    def __init__(self, customers: Optional[List[Customer]] = None):
        self.customers: List[Customer] = []
        for c in customers or []:
            self.add(c)

    def add(self, customer: Customer) -> None:
        if self.search_by_id(customer.id) is not None:
            raise ValueError(f"Duplicate customer id: {customer.id}")
        self.customers.append(customer)

    def search_by_id(self, customer_id: int) -> Optional[Customer]:
        for c in self.customers:
            if c.id == customer_id:
                return c
        return None

    def search_by_last_name(self, last_name: str) -> List[Customer]:
        return [c for c in self.customers if c.last_name == last_name]

    def list_by_type(self, customer_type: str) -> List[Customer]:
        return [c for c in self.customers if c.type == customer_type]

    def __iter__(self) -> Iterator[Customer]:
        return iter(self.customers)

    def __len__(self) -> int:
        return len(self.customers)

    def __str__(self) -> str:
        return "\n".join(str(c) for c in self.customers)
