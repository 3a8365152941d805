# Pydantic Schemas Package
from .customer import (
    ApiResponse,
    CustomerCreate, CustomerUpdate, CustomerResponse,
    AddressCreate, AddressUpdate, AddressResponse,
    EmploymentCreate, EmploymentResponse,
    CreditUpdate, CreditResponse,
)

__all__ = [
    "ApiResponse",
    "CustomerCreate", "CustomerUpdate", "CustomerResponse",
    "AddressCreate", "AddressUpdate", "AddressResponse",
    "EmploymentCreate", "EmploymentResponse",
    "CreditUpdate", "CreditResponse",
]
