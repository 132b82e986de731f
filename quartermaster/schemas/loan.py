from pydantic import BaseModel
from typing import Optional
from datetime import datetime

class LoanIn(BaseModel):
    borrower_id: Optional[int] = None
    equipment_id: Optional[int] = None

class Loan(BaseModel):
    id: int
    borrower_id: int
    equipment_id: int
    created_at: datetime
    returned: bool

    class Config:
        from_attributes = True

class LoanReceipt(BaseModel):
    loan_id: int
    borrower_id: int
    equipment_id: int
    available_quantity: int

class ActiveLoan(BaseModel):
    loan_id: int
    borrower_id: int
    borrower_last_name: str
    borrower_first_name: str
    equipment_id: int
    equipment_name: str
    equipment_category: str
    created_at: datetime

class LoanHistoryEntry(ActiveLoan):
    returned: bool
