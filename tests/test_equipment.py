#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
    tests.test_equipment
    ~~~~~~~~~~~~~~~~~~~~

    This module tests the equipment catalog.

    :copyright: (c) 2025 by Authors.
    :license: see LICENSE for more details.
"""

import pytest
from decimal import Decimal
from unittest.mock import patch
from quartermaster.core import equipment
from quartermaster.core.loans import create_loan, return_loan
from quartermaster.core.models import Equipment
from quartermaster.core.exceptions import (
    ErrorKind,
    MissingFieldError,
    InvalidFieldError,
    EquipmentNotFoundError,
    EquipmentInUseError,
)


def test_add_equipment(db_session):
    item = equipment.add_equipment(db_session, "Rifle", "Long", 100, 2)
    stored = equipment.get_equipment(db_session, item.id)
    assert stored.name == "Rifle"
    assert stored.category == "Long"
    assert stored.unit_price == Decimal("100")
    assert stored.available_quantity == 2

def test_add_equipment_accepts_zero_stock_and_price(db_session):
    item = equipment.add_equipment(db_session, "Sling", "Accessory", 0, 0)
    assert item.available_quantity == 0
    assert item.in_stock is False

def test_add_equipment_parses_decimal_price(db_session):
    item = equipment.add_equipment(db_session, "Scope", "Optics", "249.90", 1)
    assert item.unit_price == Decimal("249.90")

@pytest.mark.parametrize("fields", [
    {"name": "", "category": "Long", "unit_price": 1, "available_quantity": 1},
    {"name": "Rifle", "category": None, "unit_price": 1, "available_quantity": 1},
    {"name": "Rifle", "category": "Long", "unit_price": None, "available_quantity": 1},
    {"name": "Rifle", "category": "Long", "unit_price": 1, "available_quantity": None},
])
def test_add_equipment_missing_fields(db_session, fields):
    with pytest.raises(MissingFieldError) as excinfo:
        equipment.add_equipment(db_session, **fields)
    assert excinfo.value.kind is ErrorKind.VALIDATION
    assert db_session.query(Equipment).count() == 0

@pytest.mark.parametrize("unit_price, available_quantity", [
    (-1, 1),
    ("abc", 1),
    (True, 1),
    (1, -1),
    (1, 1.5),
    (1, True),
    (1, 10**20),
    (1, 2**31),
    (10**20, 1),
    ("100000000", 1),
])
def test_add_equipment_invalid_values(db_session, unit_price, available_quantity):
    with pytest.raises(InvalidFieldError):
        equipment.add_equipment(db_session, "Rifle", "Long", unit_price, available_quantity)

def test_missing_price_is_reported_as_missing_not_zero(db_session):
    with pytest.raises(MissingFieldError) as excinfo:
        equipment.add_equipment(db_session, "Rifle", "Long", None, 0)
    assert "unit_price" in excinfo.value.message

def test_update_equipment_replaces_all_fields(db_session, rifle):
    assert equipment.update_equipment(db_session, rifle.id, "Carbine", "Short", 80, 5) == 1
    db_session.expire_all()
    stored = equipment.get_equipment(db_session, rifle.id)
    assert (stored.name, stored.category) == ("Carbine", "Short")
    assert stored.unit_price == Decimal("80")
    assert stored.available_quantity == 5

def test_update_missing_equipment(db_session):
    with pytest.raises(EquipmentNotFoundError):
        equipment.update_equipment(db_session, 42, "Carbine", "Short", 80, 5)

def test_update_equipment_validates(db_session, rifle):
    with pytest.raises(MissingFieldError):
        equipment.update_equipment(db_session, rifle.id, "Carbine", "", 80, 5)

def test_list_equipment_paginates(db_session):
    ids = [equipment.add_equipment(db_session, f"Item {i}", "Misc", 1, 1).id for i in range(5)]
    page = equipment.list_equipment(db_session, offset=1, limit=2)
    assert [e.id for e in page] == ids[1:3]

def test_delete_equipment_without_loans(db_session, rifle):
    assert equipment.delete_equipment(db_session, rifle.id) == 1
    with pytest.raises(EquipmentNotFoundError):
        equipment.get_equipment(db_session, rifle.id)

def test_delete_missing_equipment(db_session):
    with pytest.raises(EquipmentNotFoundError):
        equipment.delete_equipment(db_session, 42)

def test_delete_equipment_with_loan_history(db_session, borrower, rifle):
    receipt = create_loan(db_session, borrower.id, rifle.id)
    return_loan(db_session, receipt.loan_id)
    with pytest.raises(EquipmentInUseError) as excinfo:
        equipment.delete_equipment(db_session, rifle.id)
    assert excinfo.value.kind is ErrorKind.CONFLICT
    assert db_session.query(Equipment).count() == 1

def test_store_rejects_deleting_referenced_equipment(db_session, borrower, rifle):
    create_loan(db_session, borrower.id, rifle.id)
    with patch.object(Equipment, "has_loans", return_value=False):
        with pytest.raises(EquipmentInUseError):
            equipment.delete_equipment(db_session, rifle.id)

def test_add_equipment_at_column_limits(db_session):
    item = equipment.add_equipment(db_session, "Crate", "Bulk", "99999999.99", 2**31 - 1)
    db_session.expire_all()
    stored = equipment.get_equipment(db_session, item.id)
    assert stored.available_quantity == 2**31 - 1
    assert stored.unit_price == Decimal("99999999.99")
