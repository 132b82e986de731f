from pydantic import BaseModel

class Changes(BaseModel):
    changes: int

class Total(BaseModel):
    total: int

class Dashboard(BaseModel):
    equipment: int
    categories: int
    borrowers: int
    active_loans: int
