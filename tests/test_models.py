import logging
from datetime import date

import pytest

from models import Customer, Item, Order, OrderLine, decrease_quantity, generate_order_line


class TestItem:
    def test_str_lists_all_fields(self, hammer):
        assert str(hammer) == "Item - ID: 1, Name: Hammer, Quantity: 10, Price: 12.5, Type: Non-Electrical"

    def test_negative_quantity_rejected(self):
        with pytest.raises(ValueError):
            Item(id=9, name="Saw", quantity=-1, price=5.0)

    def test_negative_price_rejected(self):
        with pytest.raises(ValueError):
            Item(id=9, name="Saw", quantity=1, price=-5.0)


class TestDecreaseQuantity:
    def test_decrease_returns_new_quantity(self, hammer):
        assert decrease_quantity(hammer, 4) == 6
        assert hammer.quantity == 6

    def test_decrease_to_zero(self, hammer):
        assert decrease_quantity(hammer, 10) == 0

    def test_decrease_more_than_stock_raises(self, hammer):
        with pytest.raises(ValueError, match="less than quantity to remove"):
            decrease_quantity(hammer, 11)
        assert hammer.quantity == 10

    def test_negative_decrease_raises(self, hammer):
        with pytest.raises(ValueError):
            decrease_quantity(hammer, -1)
        assert hammer.quantity == 10


class TestOrderLines:
    def test_generate_order_line_logs_notice(self, hammer, caplog):
        with caplog.at_level(logging.INFO, logger="models"):
            line = generate_order_line(hammer, 40)
        assert line.item is hammer
        assert line.quantity == 40
        assert "New order line was made." in caplog.text

    def test_generate_order_line_rejects_non_positive(self, hammer):
        with pytest.raises(ValueError):
            generate_order_line(hammer, 0)

    def test_order_str(self, hammer):
        order = Order(id=12345, date=date(2020, 10, 10))
        order.add_line(OrderLine(item=hammer, quantity=40))
        text = str(order)
        assert "ORDER ID:\t\t12345" in text
        assert "2020-10-10" in text
        assert "Item description:\tHammer" in text
        assert "Amount ordered:\t\t40" in text
        assert "Supplier ID:\t\t8001" in text
        assert order.has_line_for(hammer)


class TestCustomer:
    def test_invalid_type_rejected(self):
        with pytest.raises(ValueError):
            Customer(id=1, first_name="Jane", last_name="Doe", type="X")

    def test_str(self):
        c = Customer(id=7, first_name="Jane", last_name="Doe", phone="555", type="C")
        assert "ID: 7" in str(c)
        assert "Jane Doe" in str(c)
        assert "Type: C" in str(c)
