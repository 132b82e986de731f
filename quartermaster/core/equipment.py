#!/usr/bin/env python

"""
    Equipment catalog for Quartermaster.

    Stock counts are set here only when an item is added or replaced;
    lending and returns adjust them through `quartermaster.core.loans`.

    :copyright: (c) 2025 by AUTHORS
    :license: see LICENSE for more details
"""

import logging
from quartermaster.core.db import transaction
from quartermaster.core.models import Equipment
from quartermaster.core.utils import require_fields, clean_text, clean_price, clean_quantity
from quartermaster.core.exceptions import EquipmentNotFoundError, EquipmentInUseError

logger = logging.getLogger(__name__)


def _clean(name, category, unit_price, available_quantity):
    require_fields(
        name=name, category=category,
        unit_price=unit_price, available_quantity=available_quantity
    )
    return {
        "name": clean_text("name", name),
        "category": clean_text("category", category),
        "unit_price": clean_price(unit_price),
        "available_quantity": clean_quantity(available_quantity),
    }


def list_equipment(session, offset=None, limit=None):
    with transaction(session, action="Listing equipment"):
        return Equipment.get_many(session, offset=offset, limit=limit)


def get_equipment(session, equipment_id):
    with transaction(session, action="Fetching equipment"):
        if equipment := Equipment.get(session, equipment_id):
            return equipment
        raise EquipmentNotFoundError(f"Equipment {equipment_id} not found.")


def add_equipment(session, name, category, unit_price, available_quantity):
    """Adds an equipment line with its initial stock and returns it.

    Raises:
        MissingFieldError: If any of the four fields is missing.
        InvalidFieldError: If the price or quantity is not a non-negative number.
    """
    equipment = Equipment(**_clean(name, category, unit_price, available_quantity))
    with transaction(session, action="Adding equipment"):
        session.add(equipment)
        session.flush()
    logger.info(f"Added equipment {equipment.id} with {equipment.available_quantity} units")
    return equipment


def update_equipment(session, equipment_id, name, category, unit_price, available_quantity):
    """Replaces every field of an equipment line; returns the number of rows changed."""
    values = _clean(name, category, unit_price, available_quantity)
    with transaction(session, action="Updating equipment"):
        changes = session.query(Equipment).filter(Equipment.id == equipment_id).update(values)
        if changes == 0:
            raise EquipmentNotFoundError(f"Equipment {equipment_id} not found.")
    return changes


def delete_equipment(session, equipment_id):
    with transaction(session, action="Deleting equipment", integrity_error=EquipmentInUseError):
        equipment = Equipment.get(session, equipment_id)
        if equipment is None:
            raise EquipmentNotFoundError(f"Equipment {equipment_id} not found.")
        if equipment.has_loans(session):
            raise EquipmentInUseError()
        session.delete(equipment)
        session.flush()
    logger.info(f"Deleted equipment {equipment_id}")
    return 1
