#!/usr/bin/env python

"""
    Loan ledger for Quartermaster.

    A loan is Active until it is returned, and Returned forever after.
    Lending a unit and taking it back each touch two tables; both writes
    happen inside a single transaction so that `available_quantity`
    always equals the initial stock minus the active loans.

    :copyright: (c) 2025 by AUTHORS
    :license: see LICENSE for more details
"""

import logging
from sqlalchemy import select, update
from quartermaster.core.db import transaction
from quartermaster.core.models import Borrower, Equipment, Loan
from quartermaster.core.exceptions import (
    MissingFieldError,
    BorrowerNotFoundError,
    EquipmentNotFoundError,
    LoanNotFoundError,
    LoanAlreadyReturnedError,
    OutOfStockError,
    LoanTransactionError,
)
from quartermaster.schemas.loan import LoanReceipt

logger = logging.getLogger(__name__)


def get_loan(session, loan_id):
    with transaction(session, action="Fetching loan"):
        if loan := Loan.get(session, loan_id):
            return loan
        raise LoanNotFoundError(f"Loan {loan_id} not found.")


def create_loan(session, borrower_id, equipment_id):
    """
    Lends one unit of equipment to a borrower.

    Args:
        session: Session the loan is written through.
        borrower_id: Id of the borrowing person.
        equipment_id: Id of the equipment line to take a unit from.

    Returns:
        LoanReceipt with the new loan id and the remaining stock.

    Raises:
        MissingFieldError: If either id is missing.
        BorrowerNotFoundError: If the borrower does not exist.
        EquipmentNotFoundError: If the equipment does not exist.
        OutOfStockError: If no unit is available.
        LoanTransactionError: If the store fails; nothing is written.
    """
    if not borrower_id or not equipment_id:
        raise MissingFieldError("Borrower id and equipment id are required to create a loan.")

    with transaction(session, error=LoanTransactionError, action="Creating loan"):
        if not Borrower.exists(session, borrower_id):
            raise BorrowerNotFoundError(f"Borrower {borrower_id} not found.")

        equipment = (
            session.query(Equipment)
            .filter(Equipment.id == equipment_id)
            .with_for_update()
            .populate_existing()
            .first()
        )
        if equipment is None:
            raise EquipmentNotFoundError(f"Equipment {equipment_id} not found.")
        if not equipment.in_stock:
            logger.warning(f"Loan refused: equipment {equipment_id} is out of stock")
            raise OutOfStockError(f"No units of equipment {equipment_id} are available.")

        loan = Loan(borrower_id=borrower_id, equipment_id=equipment_id)
        session.add(loan)
        session.flush()

        # Guarded so that a concurrent loan on the last unit cannot push stock below zero
        taken = session.execute(
            update(Equipment)
            .where(Equipment.id == equipment_id, Equipment.available_quantity > 0)
            .values(available_quantity=Equipment.available_quantity - 1)
        ).rowcount
        if taken != 1:
            logger.warning(f"Loan refused: equipment {equipment_id} ran out during the transaction")
            raise OutOfStockError(f"No units of equipment {equipment_id} are available.")
        session.refresh(equipment)

    logger.info(
        f"Loan {loan.id} created: equipment {equipment_id} to borrower {borrower_id}, "
        f"{equipment.available_quantity} left"
    )
    return LoanReceipt(
        loan_id=loan.id,
        borrower_id=borrower_id,
        equipment_id=equipment_id,
        available_quantity=equipment.available_quantity,
    )


def return_loan(session, loan_id):
    """
    Marks a loan returned and puts its unit back in stock.

    Returns:
        The number of loans changed, 1 on success.

    Raises:
        LoanNotFoundError: If the loan does not exist.
        LoanAlreadyReturnedError: If the loan was returned before.
        LoanTransactionError: If the store fails; nothing is written.
    """
    with transaction(session, error=LoanTransactionError, action="Returning loan"):
        loan = (
            session.query(Loan)
            .filter(Loan.id == loan_id)
            .with_for_update()
            .populate_existing()
            .first()
        )
        if loan is None:
            raise LoanNotFoundError(f"Loan {loan_id} not found.")
        if loan.returned:
            logger.warning(f"Return refused: loan {loan_id} is already returned")
            raise LoanAlreadyReturnedError(f"Loan {loan_id} has already been returned.")

        changes = session.execute(
            update(Loan)
            .where(Loan.id == loan_id, Loan.returned == False)  # noqa: E712
            .values(returned=True)
        ).rowcount
        if changes != 1:
            raise LoanAlreadyReturnedError(f"Loan {loan_id} has already been returned.")

        session.execute(
            update(Equipment)
            .where(Equipment.id == loan.equipment_id)
            .values(available_quantity=Equipment.available_quantity + 1)
        )
        session.refresh(loan)

    logger.info(f"Loan {loan_id} returned: equipment {loan.equipment_id} restocked")
    return changes


def _loan_rows(session, active_only):
    columns = [
        Loan.id.label("loan_id"),
        Loan.borrower_id,
        Borrower.last_name.label("borrower_last_name"),
        Borrower.first_name.label("borrower_first_name"),
        Loan.equipment_id,
        Equipment.name.label("equipment_name"),
        Equipment.category.label("equipment_category"),
        Loan.created_at,
    ]
    if not active_only:
        columns.append(Loan.returned)

    query = (
        select(*columns)
        .select_from(Loan)
        .join(Borrower, Loan.borrower_id == Borrower.id)
        .join(Equipment, Loan.equipment_id == Equipment.id)
        .order_by(Loan.created_at.desc(), Loan.id.desc())
    )
    if active_only:
        query = query.where(Loan.is_active)

    with transaction(session, action="Listing loans"):
        return [dict(row) for row in session.execute(query).mappings().all()]


def list_active_loans(session):
    """Loans not yet returned, newest first, with borrower and equipment names."""
    return _loan_rows(session, active_only=True)


def list_all_loans(session):
    """Every loan ever made, newest first, including its `returned` flag."""
    return _loan_rows(session, active_only=False)
