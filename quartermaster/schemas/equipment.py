#!/usr/bin/env python
"""
    Equipment Schemas for Quartermaster.

    :copyright: (c) 2025 by AUTHORS
    :license: see LICENSE for more details
"""

from decimal import Decimal
from pydantic import BaseModel
from typing import Optional

class EquipmentIn(BaseModel):
    name: Optional[str] = None
    category: Optional[str] = None
    unit_price: Optional[Decimal] = None
    available_quantity: Optional[int] = None

class Equipment(BaseModel):
    id: int
    name: str
    category: str
    unit_price: float
    available_quantity: int

    class Config:
        from_attributes = True
        json_schema_extra = {
            "example": {
                "id": 1,
                "name": "Rifle",
                "category": "Long",
                "unit_price": 100.0,
                "available_quantity": 2
            }
        }
