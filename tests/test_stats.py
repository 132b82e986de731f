import pytest
from unittest.mock import patch
from sqlalchemy.exc import OperationalError
from quartermaster.core import stats
from quartermaster.core.borrowers import add_borrower
from quartermaster.core.equipment import add_equipment
from quartermaster.core.loans import create_loan, return_loan
from quartermaster.core.exceptions import ErrorKind, StorageError


def test_empty_store(db_session):
    assert stats.dashboard(db_session) == {
        "equipment": 0,
        "categories": 0,
        "borrowers": 0,
        "active_loans": 0,
    }

def test_counts(db_session, borrower, rifle):
    add_equipment(db_session, "Carbine", "Long", 80, 1)
    add_equipment(db_session, "Pistol", "Short", 50, 4)
    add_borrower(db_session, "Turing", "Alan")
    first = create_loan(db_session, borrower.id, rifle.id)
    create_loan(db_session, borrower.id, rifle.id)
    return_loan(db_session, first.loan_id)

    assert stats.count_equipment(db_session) == 3
    assert stats.count_categories(db_session) == 2
    assert stats.count_borrowers(db_session) == 2
    assert stats.count_active_loans(db_session) == 1

def test_storage_failure_is_internal(db_session):
    fault = OperationalError("SELECT", {}, Exception("database is locked"))
    with patch.object(db_session, "commit", side_effect=fault):
        with pytest.raises(StorageError) as excinfo:
            stats.count_borrowers(db_session)
    assert excinfo.value.kind is ErrorKind.INTERNAL
    assert "Counting borrowers failed" in excinfo.value.message
