#!/usr/bin/env python

"""
    API routes for Quartermaster,
    exposing the borrower directory, equipment catalog, loan ledger
    and dashboard statistics.

    :copyright: (c) 2025 by AUTHORS
    :license: see LICENSE for more details
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from quartermaster.core.db import get_session
from quartermaster.core import borrowers, equipment, loans, stats
from quartermaster.schemas.borrower import Borrower, BorrowerIn
from quartermaster.schemas.equipment import Equipment, EquipmentIn
from quartermaster.schemas.loan import (
    Loan,
    LoanIn,
    LoanReceipt,
    ActiveLoan,
    LoanHistoryEntry,
)
from quartermaster.schemas.stats import Changes, Total, Dashboard

router = APIRouter()


@router.get('/', status_code=status.HTTP_200_OK)
def home():
    return {"message": "Quartermaster lending ledger"}

# Borrowers

@router.get("/borrowers", response_model=List[Borrower])
def get_borrowers(offset: Optional[int] = Query(None, ge=0), limit: Optional[int] = Query(None, ge=0),
                  session: Session = Depends(get_session)):
    return borrowers.list_borrowers(session, offset=offset, limit=limit)

@router.post("/borrowers", response_model=Borrower, status_code=status.HTTP_201_CREATED)
def add_borrower(payload: BorrowerIn, session: Session = Depends(get_session)):
    return borrowers.add_borrower(session, payload.last_name, payload.first_name)

@router.get("/borrowers/{borrower_id}", response_model=Borrower)
def get_borrower(borrower_id: int, session: Session = Depends(get_session)):
    return borrowers.get_borrower(session, borrower_id)

@router.put("/borrowers/{borrower_id}", response_model=Changes)
def update_borrower(borrower_id: int, payload: BorrowerIn, session: Session = Depends(get_session)):
    return Changes(changes=borrowers.update_borrower(
        session, borrower_id, payload.last_name, payload.first_name))

@router.delete("/borrowers/{borrower_id}", response_model=Changes)
def delete_borrower(borrower_id: int, session: Session = Depends(get_session)):
    return Changes(changes=borrowers.delete_borrower(session, borrower_id))

# Equipment

@router.get("/equipment", response_model=List[Equipment])
def get_equipment_list(offset: Optional[int] = Query(None, ge=0), limit: Optional[int] = Query(None, ge=0),
                       session: Session = Depends(get_session)):
    return equipment.list_equipment(session, offset=offset, limit=limit)

@router.post("/equipment", response_model=Equipment, status_code=status.HTTP_201_CREATED)
def add_equipment(payload: EquipmentIn, session: Session = Depends(get_session)):
    return equipment.add_equipment(
        session, payload.name, payload.category,
        payload.unit_price, payload.available_quantity)

@router.get("/equipment/{equipment_id}", response_model=Equipment)
def get_equipment(equipment_id: int, session: Session = Depends(get_session)):
    return equipment.get_equipment(session, equipment_id)

@router.put("/equipment/{equipment_id}", response_model=Changes)
def update_equipment(equipment_id: int, payload: EquipmentIn, session: Session = Depends(get_session)):
    return Changes(changes=equipment.update_equipment(
        session, equipment_id, payload.name, payload.category,
        payload.unit_price, payload.available_quantity))

@router.delete("/equipment/{equipment_id}", response_model=Changes)
def delete_equipment(equipment_id: int, session: Session = Depends(get_session)):
    return Changes(changes=equipment.delete_equipment(session, equipment_id))

# Loans

@router.post("/loans", response_model=LoanReceipt, status_code=status.HTTP_201_CREATED)
def create_loan(payload: LoanIn, session: Session = Depends(get_session)):
    return loans.create_loan(session, payload.borrower_id, payload.equipment_id)

@router.get("/loans", response_model=List[ActiveLoan])
def get_active_loans(session: Session = Depends(get_session)):
    return loans.list_active_loans(session)

# Declared before /loans/{loan_id} so "history" is not taken for an id
@router.get("/loans/history", response_model=List[LoanHistoryEntry])
def get_loan_history(session: Session = Depends(get_session)):
    return loans.list_all_loans(session)

@router.get("/loans/{loan_id}", response_model=Loan)
def get_loan(loan_id: int, session: Session = Depends(get_session)):
    return loans.get_loan(session, loan_id)

@router.put("/loans/{loan_id}/return", response_model=Changes)
def return_loan(loan_id: int, session: Session = Depends(get_session)):
    return Changes(changes=loans.return_loan(session, loan_id))

# Stats

@router.get("/stats", response_model=Dashboard)
def get_dashboard(session: Session = Depends(get_session)):
    return stats.dashboard(session)

@router.get("/stats/equipment", response_model=Total)
def get_equipment_total(session: Session = Depends(get_session)):
    return Total(total=stats.count_equipment(session))

@router.get("/stats/categories", response_model=Total)
def get_category_total(session: Session = Depends(get_session)):
    return Total(total=stats.count_categories(session))

@router.get("/stats/borrowers", response_model=Total)
def get_borrower_total(session: Session = Depends(get_session)):
    return Total(total=stats.count_borrowers(session))

@router.get("/stats/active-loans", response_model=Total)
def get_active_loan_total(session: Session = Depends(get_session)):
    return Total(total=stats.count_active_loans(session))
