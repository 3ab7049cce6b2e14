"""Expense class for money spent on a vehicle."""
from datetime import date
from typing import Optional, Union

from .enums import ExpenseCategory, ExpenseType


class Expense:
    """A single expense logged against a vehicle."""

    def __init__(
            self,
            id: str,
            date: Union[str, date],
            amount: float,
            type: ExpenseType = ExpenseType.OTHER,
            category: ExpenseCategory = ExpenseCategory.OTHER,
            mileage: int = 0,
            vehicle_id: Optional[str] = None,
            description: Optional[str] = None,
            notes: Optional[str] = None,
    ):
        self.id = id
        self.vehicle_id = vehicle_id
        self.date = date
        self.amount = amount
        self.type = type
        self.category = category
        self.mileage = mileage
        self.description = description
        self.notes = notes
