"""
Customer Service - Business Logic for Customer Profiles
"""
from sqlalchemy.orm import Session, selectinload
from sqlalchemy.exc import IntegrityError
from typing import List, Optional
from uuid import UUID
import logging

from app.core.exceptions import ConflictError
from app.models import Customer, Employment, CreditHistory
from app.models.base import utcnow
from app.schemas.customer import (
    CustomerCreate,
    CustomerUpdate,
    CustomerResponse,
    EmploymentCreate,
    EmploymentResponse,
    CreditUpdate,
    CreditResponse,
)
from app.services import mapper

logger = logging.getLogger(__name__)

def _has_text(value: Optional[str]) -> bool:
    return value is not None and value.strip() != ""

class CustomerService:
    """Customer profile operations over one database session (one unit of work)"""

    def __init__(self, db: Session):
        self.db = db

    def _customers(self):
        """Customer query with address, employments and credit history loaded"""
        return self.db.query(Customer).options(
            selectinload(Customer.address),
            selectinload(Customer.employments),
            selectinload(Customer.credit_history),
        )

    def _commit(self) -> None:
        """Commit the unit of work; constraint violations surface as ConflictError"""
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            raise ConflictError(str(exc.orig)) from exc

    # ===================== CUSTOMERS =====================

    def list_active(self) -> List[CustomerResponse]:
        """Get all active customers"""
        customers = self._customers().filter(Customer.is_active == True).all()
        return [mapper.to_customer_response(c) for c in customers]

    def get_by_id(self, customer_id: UUID) -> Optional[CustomerResponse]:
        """Get active customer by ID"""
        customer = self._customers().filter(
            Customer.id == customer_id,
            Customer.is_active == True
        ).first()
        return mapper.to_customer_response(customer) if customer else None

    def get_by_email(self, email: str) -> Optional[CustomerResponse]:
        """Get active customer by exact email"""
        customer = self._customers().filter(
            Customer.email == email,
            Customer.is_active == True
        ).first()
        return mapper.to_customer_response(customer) if customer else None

    def create(self, data: CustomerCreate) -> CustomerResponse:
        """Create customer (and address if given). Duplicate email/SSN raises ConflictError."""
        customer = mapper.to_customer_entity(data)

        self.db.add(customer)
        self._commit()
        self.db.refresh(customer)

        logger.info(f"Created customer: {customer.id}")
        return mapper.to_customer_response(customer)

    def update(self, customer_id: UUID, data: CustomerUpdate) -> Optional[CustomerResponse]:
        """Partial update: only present, non-blank fields are applied.

        The address is only updated when the customer already has one;
        an address cannot be attached through an update.
        """
        customer = self._customers().filter(
            Customer.id == customer_id,
            Customer.is_active == True
        ).first()
        if not customer:
            return None

        now = utcnow()

        for field in ("first_name", "last_name", "email", "phone"):
            value = getattr(data, field)
            if _has_text(value):
                setattr(customer, field, value)

        if data.address is not None and customer.address is not None:
            address = customer.address
            for field in ("street", "city", "state", "zip_code"):
                value = getattr(data.address, field)
                if _has_text(value):
                    setattr(address, field, value)
            if data.address.unit is not None:
                address.unit = data.address.unit
            address.updated_at = now

        customer.updated_at = now
        self._commit()
        self.db.refresh(customer)

        logger.info(f"Updated customer: {customer.id}")
        return mapper.to_customer_response(customer)

    def delete(self, customer_id: UUID) -> bool:
        """Soft delete. Inactive customers are found too, so repeating a delete succeeds."""
        customer = self.db.query(Customer).filter(Customer.id == customer_id).first()
        if not customer:
            return False

        customer.is_active = False
        customer.updated_at = utcnow()
        self._commit()

        logger.info(f"Deleted customer: {customer_id}")
        return True

    # ===================== EMPLOYMENTS =====================

    def add_employment(self, customer_id: UUID, data: EmploymentCreate) -> EmploymentResponse:
        """Append an employment row. The customer id is not checked."""
        employment = Employment(
            customer_id=customer_id,
            employer_name=data.employer_name,
            job_title=data.job_title,
            employment_type=data.employment_type.value,
            annual_income=data.annual_income,
            start_date=data.start_date,
            end_date=data.end_date,
            is_current=data.is_current,
            phone=data.phone,
            address=data.address,
        )

        self.db.add(employment)
        self._commit()
        self.db.refresh(employment)

        logger.info(f"Added employment {employment.id} to customer: {customer_id}")
        return mapper.to_employment_response(employment)

    def list_employments(self, customer_id: UUID) -> List[EmploymentResponse]:
        """Current employments first, newest start date first within each group"""
        employments = self.db.query(Employment).filter(
            Employment.customer_id == customer_id
        ).order_by(
            Employment.is_current.desc(),
            Employment.start_date.desc()
        ).all()
        return [mapper.to_employment_response(e) for e in employments]

    # ===================== CREDIT HISTORY =====================

    def get_credit_history(self, customer_id: UUID) -> Optional[CreditResponse]:
        credit = self.db.query(CreditHistory).filter(
            CreditHistory.customer_id == customer_id
        ).first()
        return mapper.to_credit_response(credit) if credit else None

    def upsert_credit_history(self, customer_id: UUID, data: CreditUpdate) -> CreditResponse:
        """Create the credit record on first use, otherwise overwrite score and
        report date and any optional figure that was supplied."""
        credit = self.db.query(CreditHistory).filter(
            CreditHistory.customer_id == customer_id
        ).first()
        now = utcnow()

        if credit is None:
            credit = CreditHistory(
                customer_id=customer_id,
                credit_score=data.credit_score,
                report_date=now,
                credit_bureau=data.credit_bureau or "Experian",
                total_debt=data.total_debt if data.total_debt is not None else 0,
                available_credit=data.available_credit if data.available_credit is not None else 0,
                number_of_accounts=data.number_of_accounts or 0,
                late_payments=data.late_payments or 0,
                bankruptcies=data.bankruptcies or 0,
                foreclosures=data.foreclosures or 0,
            )
            self.db.add(credit)
            action = "Created"
        else:
            credit.credit_score = data.credit_score
            credit.report_date = now
            for field in (
                "credit_bureau", "total_debt", "available_credit",
                "number_of_accounts", "late_payments", "bankruptcies", "foreclosures",
            ):
                value = getattr(data, field)
                if value is not None:
                    setattr(credit, field, value)
            credit.updated_at = now
            action = "Updated"

        self._commit()
        self.db.refresh(credit)

        logger.info(f"{action} credit history for customer: {customer_id}")
        return mapper.to_credit_response(credit)
