# store.py
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, TypeVar

from directory import CustomerList, SupplierList
from inventory import DEFAULT_RESTOCK_TARGET, DEFAULT_RESTOCK_THRESHOLD, Inventory
from models import Customer, Item, Supplier
from shop import ShopManager
from utils import load_json_or_default, safe_int

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _default_settings() -> Dict[str, Any]:
    return {
        "restock_threshold": DEFAULT_RESTOCK_THRESHOLD,
        "restock_target": DEFAULT_RESTOCK_TARGET,
        "price_decimals": 2,
    }


def _default_data() -> Dict[str, Any]:
    return {
        "items": [],
        "suppliers": [],
        "customers": [],
        "settings": _default_settings(),
    }


def _normalize(d: Dict[str, Any]) -> Dict[str, Any]:
    if not isinstance(d, dict):
        raise ValueError("shop data must be an object")
    for k, v in _default_data().items():
        if k not in d:
            d[k] = v

    if not isinstance(d["settings"], dict):
        d["settings"] = _default_settings()
    for k, v in _default_settings().items():
        d["settings"].setdefault(k, v)

    for key, kind in (("items", "item"), ("suppliers", "supplier"), ("customers", "customer")):
        if not isinstance(d[key], list):
            raise ValueError(f"{key} must be a list")
        for i, r in enumerate(d[key]):
            if not isinstance(r, dict):
                raise ValueError(f"{kind} record #{i}: not an object")

    for it in d["items"]:
        it.setdefault("type", "")
        it.setdefault("supplier_id", None)

    for cu in d["customers"]:
        cu.setdefault("type", "R")
    return d


def _whole(value: Any, field: str) -> int:
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise ValueError(f"{field} must be a whole number, got {value!r}")
    return int(value)


# -------------------------
# Record builders
# -------------------------
def _item(r: Dict[str, Any]) -> Item:
    return Item(
        id=_whole(r["id"], "id"),
        name=str(r["name"]).strip(),
        quantity=_whole(r["quantity"], "quantity"),
        price=float(r["price"]),
        type=str(r["type"]).strip(),
        supplier_id=None if r["supplier_id"] is None else _whole(r["supplier_id"], "supplier_id"),
    )


def _supplier(r: Dict[str, Any]) -> Supplier:
    return Supplier(
        id=_whole(r["id"], "id"),
        name=str(r["name"]).strip(),
        address=str(r.get("address", "")).strip(),
        contact=str(r.get("contact", "")).strip(),
    )


def _customer(r: Dict[str, Any]) -> Customer:
    return Customer(
        id=_whole(r["id"], "id"),
        first_name=str(r["first_name"]).strip(),
        last_name=str(r["last_name"]).strip(),
        address=str(r.get("address", "")).strip(),
        postal_code=str(r.get("postal_code", "")).strip(),
        phone=str(r.get("phone", "")).strip(),
        type=str(r["type"]).strip().upper(),
    )


def _build_all(kind: str, records: List[Dict[str, Any]], build: Callable[[Dict[str, Any]], T]) -> List[T]:
    out = []
    for i, r in enumerate(records):
        try:
            out.append(build(r))
        except KeyError as e:
            raise ValueError(f"{kind} record #{i}: missing field {e}") from e
        except (TypeError, ValueError) as e:
            raise ValueError(f"{kind} record #{i}: {e}") from e
    return out


# -------------------------
# Public
# -------------------------
def build_shop(data: Dict[str, Any]) -> ShopManager:
    d = _normalize(data)
    settings = d["settings"]

    inventory = Inventory(
        _build_all("item", d["items"], _item),
        restock_threshold=safe_int(settings["restock_threshold"], DEFAULT_RESTOCK_THRESHOLD),
        restock_target=safe_int(settings["restock_target"], DEFAULT_RESTOCK_TARGET),
    )
    suppliers = SupplierList(_build_all("supplier", d["suppliers"], _supplier))
    customers = CustomerList(_build_all("customer", d["customers"], _customer))

    return ShopManager(
        inventory,
        suppliers,
        customers,
        price_decimals=safe_int(settings["price_decimals"], 2),
    )


def load_shop(path: str) -> ShopManager:
    shop = build_shop(load_json_or_default(path, _default_data()))
    logger.info(
        "Loaded shop from %s: %d items, %d suppliers, %d customers",
        path, len(shop.inventory), len(shop.supplier_list), len(shop.customer_list),
    )
    return shop
