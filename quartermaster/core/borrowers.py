#!/usr/bin/env python

"""
    Borrower directory for Quartermaster.

    :copyright: (c) 2025 by AUTHORS
    :license: see LICENSE for more details
"""

import logging
from quartermaster.core.db import transaction
from quartermaster.core.models import Borrower
from quartermaster.core.utils import require_fields, clean_text
from quartermaster.core.exceptions import BorrowerNotFoundError, BorrowerInUseError

logger = logging.getLogger(__name__)


def list_borrowers(session, offset=None, limit=None):
    with transaction(session, action="Listing borrowers"):
        return Borrower.get_many(session, offset=offset, limit=limit)


def get_borrower(session, borrower_id):
    with transaction(session, action="Fetching borrower"):
        if borrower := Borrower.get(session, borrower_id):
            return borrower
        raise BorrowerNotFoundError(f"Borrower {borrower_id} not found.")


def add_borrower(session, last_name, first_name):
    """Adds a borrower and returns it with its generated id.

    Raises:
        MissingFieldError: If either name is missing or blank.
    """
    require_fields(last_name=last_name, first_name=first_name)
    borrower = Borrower(
        last_name=clean_text("last_name", last_name),
        first_name=clean_text("first_name", first_name),
    )
    with transaction(session, action="Adding borrower"):
        session.add(borrower)
        session.flush()
    logger.info(f"Added borrower {borrower.id}")
    return borrower


def update_borrower(session, borrower_id, last_name, first_name):
    """Replaces both names of a borrower; returns the number of rows changed."""
    require_fields(last_name=last_name, first_name=first_name)
    values = {
        Borrower.last_name: clean_text("last_name", last_name),
        Borrower.first_name: clean_text("first_name", first_name),
    }
    with transaction(session, action="Updating borrower"):
        changes = session.query(Borrower).filter(Borrower.id == borrower_id).update(values)
        if changes == 0:
            raise BorrowerNotFoundError(f"Borrower {borrower_id} not found.")
    return changes


def delete_borrower(session, borrower_id):
    """Deletes a borrower that has never held a loan.

    Raises:
        BorrowerNotFoundError: If no such borrower exists.
        BorrowerInUseError: If any loan, returned or not, references it.
    """
    with transaction(session, action="Deleting borrower", integrity_error=BorrowerInUseError):
        borrower = Borrower.get(session, borrower_id)
        if borrower is None:
            raise BorrowerNotFoundError(f"Borrower {borrower_id} not found.")
        if borrower.has_loans(session):
            raise BorrowerInUseError()
        session.delete(borrower)
        session.flush()
    logger.info(f"Deleted borrower {borrower_id}")
    return 1
