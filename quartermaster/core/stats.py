from sqlalchemy import func, distinct
from quartermaster.core.db import transaction
from quartermaster.core.models import Borrower, Equipment, Loan


def _scalar(session, query, action):
    with transaction(session, action=action):
        return query.scalar() or 0


def count_equipment(session):
    return _scalar(session, session.query(func.count(Equipment.id)), "Counting equipment")


def count_categories(session):
    return _scalar(
        session, session.query(func.count(distinct(Equipment.category))),
        "Counting equipment categories")


def count_borrowers(session):
    return _scalar(session, session.query(func.count(Borrower.id)), "Counting borrowers")


def count_active_loans(session):
    return _scalar(
        session,
        session.query(func.count(Loan.id)).filter(Loan.is_active),
        "Counting active loans")


def dashboard(session):
    """All four counters at once, as shown on the lending dashboard."""
    return {
        "equipment": count_equipment(session),
        "categories": count_categories(session),
        "borrowers": count_borrowers(session),
        "active_loans": count_active_loans(session),
    }
