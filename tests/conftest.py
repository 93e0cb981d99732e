"""
Shared fixtures: a small in-memory shop.
"""
import pytest

from directory import CustomerList, SupplierList
from inventory import Inventory
from models import Customer, Item, Supplier
from shop import ShopManager


@pytest.fixture
def hammer():
    return Item(id=1, name="Hammer", quantity=10, price=12.5, type="Non-Electrical", supplier_id=8001)


@pytest.fixture
def drill():
    return Item(id=2, name="Drill", quantity=100, price=89.99, type="Electrical", supplier_id=8002)


@pytest.fixture
def inventory(hammer, drill):
    return Inventory([hammer, drill])


@pytest.fixture
def suppliers():
    return SupplierList([
        Supplier(id=8001, name="Grommet Builders", address="788 30th St., SE, Calgary", contact="Fred"),
        Supplier(id=8002, name="Power Tools Ltd", address="1 Volt Rd", contact="Ann"),
    ])


@pytest.fixture
def customers():
    return CustomerList([
        Customer(id=1, first_name="Jane", last_name="Doe", type="R"),
        Customer(id=2, first_name="John", last_name="Doe", type="C"),
        Customer(id=3, first_name="Ada", last_name="Smith", type="R"),
    ])


@pytest.fixture
def shop(inventory, suppliers, customers):
    return ShopManager(inventory, suppliers, customers)
