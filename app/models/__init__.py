from .base import TimestampMixin, UUIDMixin
from .enums import AddressType, EmploymentType
from .customer import Customer, Address, Employment, CreditHistory

__all__ = [
    # Base
    "TimestampMixin", "UUIDMixin",
    # Enums
    "AddressType", "EmploymentType",
    # Customer profile
    "Customer", "Address", "Employment", "CreditHistory",
]
