from datetime import date
from pydantic import BaseModel, Field, field_validator
from typing import Literal, Optional

CATEGORY_TYPES = ("income", "expense")
LEGACY_CATEGORY_TYPES = {"revenue": "income"}

DEFAULT_CATEGORY_COLOR = "#6B7280"
CATEGORY_PALETTE = ("#4338CA", "#3B82F6", "#8B5CF6", "#EC4899")


# Request bodies
class CategoryForm(BaseModel):
    name: str = Field(min_length=1)
    type: str = "income"
    color: Optional[str] = CATEGORY_PALETTE[0]

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Please enter a category name")
        return value

    @field_validator("type")
    @classmethod
    def check_type(cls, value: str) -> str:
        value = LEGACY_CATEGORY_TYPES.get(value.lower(), value.lower())
        if value not in CATEGORY_TYPES:
            raise ValueError("Category type must be income or expense")
        return value

    @field_validator("color")
    @classmethod
    def default_color(cls, value: Optional[str]) -> str:
        return value or CATEGORY_PALETTE[0]

class EntryForm(BaseModel):
    date: date
    product_or_service: str = Field(min_length=1)
    revenue: float = Field(default=0, ge=0)
    cost: float = Field(default=0, ge=0)
    category_id: str = Field(min_length=1)
    notes: Optional[str] = None

class DebtCreditForm(BaseModel):
    name: str = Field(min_length=1)
    amount: float = Field(gt=0)
    reason: str = Field(min_length=1)
    date: date
    due_date: date
    status: Literal["paid", "unpaid"] = "unpaid"
    type: Literal["receivable", "payable"]

class DebtCreditUpdateForm(DebtCreditForm):
    # omitted status keeps the stored one
    status: Optional[Literal["paid", "unpaid"]] = None


# Rows as returned by the store
class CategoryRecord(BaseModel):
    id: str
    name: str
    type: str
    color: Optional[str] = None
    user_id: Optional[str] = None
    created_at: Optional[str] = None

class EntryRecord(BaseModel):
    id: str
    date: date
    product_or_service: str
    revenue: float = 0
    cost: float = 0
    category_id: Optional[str] = None
    notes: Optional[str] = None
    user_id: Optional[str] = None
    created_at: Optional[str] = None

    @property
    def profit(self) -> float:
        return self.revenue - self.cost

class DebtCreditRecord(BaseModel):
    id: str
    name: str
    amount: float
    reason: str
    date: date
    due_date: date
    status: Literal["paid", "unpaid"]
    type: Literal["receivable", "payable"]
    user_id: Optional[str] = None
    created_at: Optional[str] = None
