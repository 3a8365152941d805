"""
Customer Profile Models: Customer, Address, Employment, CreditHistory
"""
from sqlalchemy import Column, String, Date, DateTime, Numeric, Boolean, Integer, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from app.core import Base
from .base import UUIDMixin, TimestampMixin, utcnow
from .enums import AddressType, EmploymentType

class Customer(Base, UUIDMixin, TimestampMixin):
    """Customer Identity"""
    __tablename__ = "customer"
    
    first_name = Column(String(50), nullable=False)
    last_name = Column(String(50), nullable=False)
    email = Column(String(100), unique=True, nullable=False, index=True)
    phone = Column(String(20), nullable=False)
    ssn = Column(String(11), unique=True, nullable=False)
    date_of_birth = Column(Date, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    
    # Relationships (owned, one-directional)
    address = relationship("Address", uselist=False, cascade="all, delete-orphan")
    employments = relationship("Employment", cascade="all, delete-orphan")
    credit_history = relationship("CreditHistory", uselist=False, cascade="all, delete-orphan")

class Address(Base, UUIDMixin, TimestampMixin):
    """Customer Address (one per customer)"""
    __tablename__ = "address"
    
    customer_id = Column(Uuid(as_uuid=True), ForeignKey("customer.id", ondelete="CASCADE"), unique=True, nullable=False)
    street = Column(String(200), nullable=False)
    unit = Column(String(100))
    city = Column(String(100), nullable=False)
    state = Column(String(50), nullable=False)
    zip_code = Column(String(10), nullable=False)
    country = Column(String(50), default="USA", nullable=False)
    address_type = Column(String(20), default=AddressType.PRIMARY.value, nullable=False)

class Employment(Base, UUIDMixin, TimestampMixin):
    """Employment record (many per customer)"""
    __tablename__ = "employment"
    
    customer_id = Column(Uuid(as_uuid=True), ForeignKey("customer.id", ondelete="CASCADE"), nullable=False, index=True)
    employer_name = Column(String(100), nullable=False)
    job_title = Column(String(100))
    employment_type = Column(String(20), default=EmploymentType.FULL_TIME.value, nullable=False)
    annual_income = Column(Numeric(18, 2), nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date)
    is_current = Column(Boolean, default=True, nullable=False)
    phone = Column(String(20))
    address = Column(String(200))

class CreditHistory(Base, UUIDMixin, TimestampMixin):
    """Credit bureau snapshot (one per customer)"""
    __tablename__ = "credit_history"
    
    customer_id = Column(Uuid(as_uuid=True), ForeignKey("customer.id", ondelete="CASCADE"), unique=True, nullable=False)
    credit_score = Column(Integer, nullable=False)  # 300-850
    report_date = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    credit_bureau = Column(String(50), default="Experian", nullable=False)
    total_debt = Column(Numeric(18, 2), default=0, nullable=False)
    available_credit = Column(Numeric(18, 2), default=0, nullable=False)
    number_of_accounts = Column(Integer, default=0, nullable=False)
    late_payments = Column(Integer, default=0, nullable=False)
    bankruptcies = Column(Integer, default=0, nullable=False)
    foreclosures = Column(Integer, default=0, nullable=False)
