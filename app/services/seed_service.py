"""
Seed Service - Fixture customers loaded on first start
"""
from sqlalchemy.orm import Session
from datetime import date, timedelta
from decimal import Decimal
from uuid import UUID
import logging

from app.models import Customer, Address, Employment, CreditHistory, EmploymentType
from app.models.base import utcnow

logger = logging.getLogger(__name__)

JOHN_DOE_ID = UUID("11111111-1111-1111-1111-111111111111")
JANE_SMITH_ID = UUID("22222222-2222-2222-2222-222222222222")

def build_seed_customers() -> list:
    """Fixture customers with fixed identifiers"""
    now = utcnow()

    john = Customer(
        id=JOHN_DOE_ID,
        first_name="John",
        last_name="Doe",
        email="john.doe@email.com",
        phone="+1-555-0101",
        ssn="123-45-6789",
        date_of_birth=date(1985, 5, 15),
        is_active=True,
        created_at=now,
    )
    john.address = Address(
        id=UUID("aaaa1111-1111-1111-1111-111111111111"),
        street="123 Main Street",
        city="New York",
        state="NY",
        zip_code="10001",
        country="USA",
        created_at=now,
    )
    john.employments = [
        Employment(
            id=UUID("bbbb1111-1111-1111-1111-111111111111"),
            employer_name="Tech Corp Inc",
            job_title="Software Engineer",
            employment_type=EmploymentType.FULL_TIME.value,
            annual_income=Decimal("120000"),
            start_date=date(2018, 3, 1),
            is_current=True,
            created_at=now,
        )
    ]
    john.credit_history = CreditHistory(
        id=UUID("cccc1111-1111-1111-1111-111111111111"),
        credit_score=750,
        report_date=now - timedelta(days=30),
        credit_bureau="Experian",
        total_debt=Decimal("25000"),
        available_credit=Decimal("50000"),
        number_of_accounts=5,
        late_payments=0,
        bankruptcies=0,
        foreclosures=0,
        created_at=now,
    )

    jane = Customer(
        id=JANE_SMITH_ID,
        first_name="Jane",
        last_name="Smith",
        email="jane.smith@email.com",
        phone="+1-555-0102",
        ssn="987-65-4321",
        date_of_birth=date(1990, 8, 22),
        is_active=True,
        created_at=now,
    )
    jane.address = Address(
        id=UUID("aaaa2222-2222-2222-2222-222222222222"),
        street="456 Oak Avenue",
        unit="Apt 2B",
        city="Los Angeles",
        state="CA",
        zip_code="90001",
        country="USA",
        created_at=now,
    )
    jane.employments = [
        Employment(
            id=UUID("bbbb2222-2222-2222-2222-222222222222"),
            employer_name="Finance Plus LLC",
            job_title="Financial Analyst",
            employment_type=EmploymentType.FULL_TIME.value,
            annual_income=Decimal("95000"),
            start_date=date(2019, 6, 15),
            is_current=True,
            created_at=now,
        )
    ]
    jane.credit_history = CreditHistory(
        id=UUID("cccc2222-2222-2222-2222-222222222222"),
        credit_score=680,
        report_date=now - timedelta(days=15),
        credit_bureau="TransUnion",
        total_debt=Decimal("35000"),
        available_credit=Decimal("40000"),
        number_of_accounts=7,
        late_payments=1,
        bankruptcies=0,
        foreclosures=0,
        created_at=now,
    )

    return [john, jane]

def seed_customers(db: Session) -> int:
    """Insert fixture customers unless they are already there. Returns rows added."""
    if db.query(Customer).filter(Customer.id == JOHN_DOE_ID).first():
        logger.info("Seed data already present, skipping")
        return 0

    customers = build_seed_customers()
    db.add_all(customers)
    db.commit()

    logger.info(f"Seeded {len(customers)} customers")
    return len(customers)
