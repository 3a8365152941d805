"""
Customer Mapper - Entity <-> Schema conversion and derived fields

Everything here is pure: entities are read, never written, and derived
values (full name, age, years employed, rating, ratios) are computed on
every call instead of being stored.
"""
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Optional

from app.models import Customer, Address, Employment, CreditHistory, AddressType, EmploymentType
from app.schemas.customer import (
    CustomerCreate,
    CustomerResponse,
    AddressResponse,
    EmploymentResponse,
    CreditResponse,
)

# (lower bound, rating), checked top-down
CREDIT_RATING_BANDS = [
    (800, "Excellent"),
    (740, "Very Good"),
    (670, "Good"),
    (580, "Fair"),
]

# ===================== DERIVED FIELDS =====================

def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Timestamps go out as aware UTC; SQLite hands back naive values"""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)

def full_name(first_name: str, last_name: str) -> str:
    return f"{first_name} {last_name}"

def calculate_age(date_of_birth: date, today: Optional[date] = None) -> int:
    """Whole years since birth, one less while this year's birthday is ahead.

    The birthday test compares day-of-year, so a leap-year birth date can be
    off by one day against a non-leap current year.
    """
    today = today or date.today()
    age = today.year - date_of_birth.year
    if today.timetuple().tm_yday < date_of_birth.timetuple().tm_yday:
        age -= 1
    return age

def full_address(street: str, unit: Optional[str], city: str, state: str, zip_code: str) -> str:
    if unit:
        return f"{street} {unit}, {city}, {state} {zip_code}"
    return f"{street}, {city}, {state} {zip_code}"

def years_employed(
    start_date: date,
    end_date: Optional[date],
    is_current: bool,
    today: Optional[date] = None,
) -> int:
    today = today or date.today()
    if is_current:
        return today.year - start_date.year
    return (end_date.year if end_date else today.year) - start_date.year

def credit_rating(credit_score: int) -> str:
    for lower_bound, rating in CREDIT_RATING_BANDS:
        if credit_score >= lower_bound:
            return rating
    return "Poor"

def debt_to_income_ratio(total_debt, available_credit) -> Decimal:
    """Debt as a percentage of available credit, 0 when there is no credit"""
    total_debt = Decimal(str(total_debt or 0))
    available_credit = Decimal(str(available_credit or 0))
    if available_credit <= 0:
        return Decimal("0")
    return round(total_debt / available_credit * 100, 2)

# ===================== ENTITY -> RESPONSE =====================

def to_address_response(address: Address) -> AddressResponse:
    return AddressResponse(
        id=address.id,
        street=address.street,
        unit=address.unit,
        city=address.city,
        state=address.state,
        zip_code=address.zip_code,
        country=address.country,
        address_type=AddressType.parse(address.address_type).value,
        full_address=full_address(address.street, address.unit, address.city, address.state, address.zip_code),
    )

def to_employment_response(employment: Employment, today: Optional[date] = None) -> EmploymentResponse:
    return EmploymentResponse(
        id=employment.id,
        employer_name=employment.employer_name,
        job_title=employment.job_title,
        employment_type=EmploymentType.parse(employment.employment_type).value,
        annual_income=float(employment.annual_income or 0),
        start_date=employment.start_date,
        end_date=employment.end_date,
        is_current=employment.is_current,
        years_employed=years_employed(employment.start_date, employment.end_date, employment.is_current, today),
    )

def to_credit_response(credit: CreditHistory) -> CreditResponse:
    return CreditResponse(
        id=credit.id,
        credit_score=credit.credit_score,
        credit_rating=credit_rating(credit.credit_score),
        report_date=as_utc(credit.report_date),
        credit_bureau=credit.credit_bureau,
        total_debt=float(credit.total_debt or 0),
        available_credit=float(credit.available_credit or 0),
        debt_to_income_ratio=float(debt_to_income_ratio(credit.total_debt, credit.available_credit)),
        number_of_accounts=credit.number_of_accounts or 0,
        late_payments=credit.late_payments or 0,
        bankruptcies=credit.bankruptcies or 0,
        foreclosures=credit.foreclosures or 0,
    )

def to_customer_response(customer: Customer, today: Optional[date] = None) -> CustomerResponse:
    return CustomerResponse(
        id=customer.id,
        first_name=customer.first_name,
        last_name=customer.last_name,
        full_name=full_name(customer.first_name, customer.last_name),
        email=customer.email,
        phone=customer.phone,
        date_of_birth=customer.date_of_birth,
        age=calculate_age(customer.date_of_birth, today),
        address=to_address_response(customer.address) if customer.address else None,
        employments=[to_employment_response(e, today) for e in customer.employments],
        credit_history=to_credit_response(customer.credit_history) if customer.credit_history else None,
        created_at=as_utc(customer.created_at),
        updated_at=as_utc(customer.updated_at),
    )

# ===================== REQUEST -> ENTITY =====================

def to_customer_entity(data: CustomerCreate) -> Customer:
    """Build a new (unsaved) customer, plus its address when one was sent"""
    customer = Customer(
        first_name=data.first_name,
        last_name=data.last_name,
        email=data.email,
        phone=data.phone,
        ssn=data.ssn,
        date_of_birth=data.date_of_birth,
        is_active=True,
    )

    if data.address is not None:
        customer.address = Address(
            street=data.address.street,
            unit=data.address.unit,
            city=data.address.city,
            state=data.address.state,
            zip_code=data.address.zip_code,
            country=data.address.country or "USA",
            address_type=data.address.address_type.value,
        )

    return customer
