"""
Customer Profile Schemas
"""
import re
from pydantic import BaseModel, Field, EmailStr, field_validator
from pydantic.alias_generators import to_camel
from typing import Optional, List, Generic, TypeVar
from datetime import date, datetime, timezone
from uuid import UUID
from decimal import Decimal

from app.models.enums import AddressType, EmploymentType

T = TypeVar("T")

PHONE_PATTERN = re.compile(r"^\+?[0-9 ()\-.]+$")

def _check_phone(value: Optional[str]) -> Optional[str]:
    if value is None:
        return value
    if not PHONE_PATTERN.match(value) or sum(ch.isdigit() for ch in value) < 7:
        raise ValueError("must be a valid phone number")
    return value

def _to_date(value):
    # Date-times are accepted and truncated to their date part
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str) and len(value) > 10:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
    return value

def _blank_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value

class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True

# ============== Requests ==============

class AddressCreate(CamelModel):
    street: str = Field(..., min_length=1, max_length=200)
    unit: Optional[str] = Field(None, max_length=100)
    city: str = Field(..., min_length=1, max_length=100)
    state: str = Field(..., min_length=1, max_length=50)
    zip_code: str = Field(..., min_length=1, max_length=10)
    country: str = Field("USA", max_length=50)
    address_type: AddressType = AddressType.PRIMARY

    @field_validator("address_type", mode="before")
    @classmethod
    def parse_address_type(cls, value):
        return AddressType.parse(value)

class CustomerCreate(CamelModel):
    first_name: str = Field(..., min_length=2, max_length=50)
    last_name: str = Field(..., min_length=2, max_length=50)
    email: EmailStr
    phone: str = Field(..., max_length=20)
    ssn: str = Field(..., min_length=9, max_length=11)
    date_of_birth: date
    address: Optional[AddressCreate] = None

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, value):
        return _check_phone(value)

    @field_validator("date_of_birth", mode="before")
    @classmethod
    def truncate_date_of_birth(cls, value):
        return _to_date(value)

class AddressUpdate(CamelModel):
    street: Optional[str] = Field(None, max_length=200)
    unit: Optional[str] = Field(None, max_length=100)
    city: Optional[str] = Field(None, max_length=100)
    state: Optional[str] = Field(None, max_length=50)
    zip_code: Optional[str] = Field(None, max_length=10)

    @field_validator("street", "city", "state", "zip_code", mode="before")
    @classmethod
    def blank_is_missing(cls, value):
        return _blank_to_none(value)

class CustomerUpdate(CamelModel):
    first_name: Optional[str] = Field(None, min_length=2, max_length=50)
    last_name: Optional[str] = Field(None, min_length=2, max_length=50)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, max_length=20)
    address: Optional[AddressUpdate] = None

    @field_validator("first_name", "last_name", "email", "phone", mode="before")
    @classmethod
    def blank_is_missing(cls, value):
        return _blank_to_none(value)

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, value):
        return _check_phone(value)

class EmploymentCreate(CamelModel):
    employer_name: str = Field(..., min_length=1, max_length=100)
    job_title: Optional[str] = Field(None, max_length=100)
    employment_type: EmploymentType
    annual_income: Decimal = Field(..., ge=0, le=100000000)
    start_date: date
    end_date: Optional[date] = None
    is_current: bool = True
    phone: Optional[str] = Field(None, max_length=20)
    address: Optional[str] = Field(None, max_length=200)

    @field_validator("employment_type", mode="before")
    @classmethod
    def parse_employment_type(cls, value):
        return EmploymentType.parse(value)

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def truncate_dates(cls, value):
        return _to_date(value)

class CreditUpdate(CamelModel):
    credit_score: int = Field(..., ge=300, le=850)
    credit_bureau: Optional[str] = Field(None, max_length=50)
    total_debt: Optional[Decimal] = Field(None, ge=0)
    available_credit: Optional[Decimal] = Field(None, ge=0)
    number_of_accounts: Optional[int] = Field(None, ge=0)
    late_payments: Optional[int] = Field(None, ge=0)
    bankruptcies: Optional[int] = Field(None, ge=0)
    foreclosures: Optional[int] = Field(None, ge=0)

# ============== Responses ==============

class AddressResponse(CamelModel):
    id: UUID
    street: str
    unit: Optional[str] = None
    city: str
    state: str
    zip_code: str
    country: str
    address_type: str
    full_address: str

class EmploymentResponse(CamelModel):
    id: UUID
    employer_name: str
    job_title: Optional[str] = None
    employment_type: str
    annual_income: float
    start_date: date
    end_date: Optional[date] = None
    is_current: bool
    years_employed: int

class CreditResponse(CamelModel):
    id: UUID
    credit_score: int
    credit_rating: str
    report_date: datetime
    credit_bureau: str
    total_debt: float
    available_credit: float
    debt_to_income_ratio: float
    number_of_accounts: int
    late_payments: int
    bankruptcies: int
    foreclosures: int

class CustomerResponse(CamelModel):
    id: UUID
    first_name: str
    last_name: str
    full_name: str
    email: str
    phone: str
    date_of_birth: date
    age: int
    address: Optional[AddressResponse] = None
    employments: List[EmploymentResponse] = []
    credit_history: Optional[CreditResponse] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

# ============== Envelope ==============

class ApiResponse(BaseModel, Generic[T]):
    """Uniform response wrapper"""
    success: bool
    message: str = ""
    data: Optional[T] = None
    errors: Optional[List[str]] = None
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def ok(cls, data=None, message: str = "Success"):
        return cls(success=True, message=message, data=data)

    @classmethod
    def fail(cls, message: str, errors: Optional[List[str]] = None):
        return cls(success=False, message=message, errors=errors)
