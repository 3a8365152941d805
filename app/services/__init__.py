# Services Package
from . import mapper
from .customer_service import CustomerService
from .seed_service import seed_customers, JOHN_DOE_ID, JANE_SMITH_ID

__all__ = [
    "mapper",
    "CustomerService",
    "seed_customers",
    "JOHN_DOE_ID",
    "JANE_SMITH_ID",
]
