#!/usr/bin/env python

"""
    Ledger models for Quartermaster,
    the borrowers, equipment and loans tables and their constraints.

    :copyright: (c) 2025 by AUTHORS
    :license: see LICENSE for more details
"""

import datetime
from sqlalchemy import (
    Column, String, Boolean, Integer, Numeric, DateTime,
    ForeignKey, CheckConstraint
)
from sqlalchemy.orm import relationship
from sqlalchemy.ext.hybrid import hybrid_property
from quartermaster.core.db import Base


def utcnow():
    return datetime.datetime.now(datetime.timezone.utc)


class Borrower(Base):
    __tablename__ = 'borrowers'

    id = Column(Integer, primary_key=True, autoincrement=True)
    last_name = Column(String(100), nullable=False)
    first_name = Column(String(100), nullable=False)

    def has_loans(self, session):
        """True if any loan, returned or not, references this borrower."""
        return session.query(Loan.id).filter(Loan.borrower_id == self.id).first() is not None


class Equipment(Base):
    __tablename__ = 'equipment'
    __table_args__ = (
        CheckConstraint('available_quantity >= 0', name='ck_equipment_available_quantity'),
        CheckConstraint('unit_price >= 0', name='ck_equipment_unit_price'),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    category = Column(String(100), nullable=False)
    unit_price = Column(Numeric(10, 2), nullable=False)
    available_quantity = Column(Integer, nullable=False, default=0)

    @hybrid_property
    def in_stock(self):
        """True while at least one unit can be lent out."""
        return self.available_quantity > 0

    def has_loans(self, session):
        return session.query(Loan.id).filter(Loan.equipment_id == self.id).first() is not None


class Loan(Base):
    __tablename__ = 'loans'

    id = Column(Integer, primary_key=True, autoincrement=True)
    borrower_id = Column(Integer, ForeignKey('borrowers.id', ondelete='RESTRICT'), nullable=False, index=True)
    equipment_id = Column(Integer, ForeignKey('equipment.id', ondelete='RESTRICT'), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)
    returned = Column(Boolean, default=False, nullable=False)

    # Loans are the only side that navigates; deleting a borrower or equipment
    # must never cascade into or nullify loan rows.
    borrower = relationship('Borrower')
    equipment = relationship('Equipment')

    @hybrid_property
    def is_active(self):
        return self.returned == False  # noqa: E712
