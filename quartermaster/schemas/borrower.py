#!/usr/bin/env python
"""
    Borrower Schemas for Quartermaster.

    :copyright: (c) 2025 by AUTHORS
    :license: see LICENSE for more details
"""

from pydantic import BaseModel
from typing import Optional

class BorrowerIn(BaseModel):
    # Presence is checked by the borrower directory so that a missing
    # name is reported like any other validation failure.
    last_name: Optional[str] = None
    first_name: Optional[str] = None

class Borrower(BaseModel):
    id: int
    last_name: str
    first_name: str

    class Config:
        from_attributes = True
        json_schema_extra = {
            "example": {
                "id": 1,
                "last_name": "Lovelace",
                "first_name": "Ada"
            }
        }
