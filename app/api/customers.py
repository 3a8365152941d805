"""
Customers API
"""
from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse
from fastapi.encoders import jsonable_encoder
from sqlalchemy.orm import Session
from typing import List, Optional
from uuid import UUID
import logging

from app.core import get_db
from app.core.exceptions import ConflictError
from app.schemas.customer import (
    ApiResponse,
    CustomerCreate,
    CustomerUpdate,
    CustomerResponse,
    EmploymentCreate,
    EmploymentResponse,
    CreditUpdate,
    CreditResponse,
)
from app.services import CustomerService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/customers", tags=["customers"])

def get_customer_service(db: Session = Depends(get_db)) -> CustomerService:
    return CustomerService(db)

def fail(status_code: int, message: str, errors: Optional[List[str]] = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(ApiResponse.fail(message, errors)),
    )

def parse_id(value: str) -> Optional[UUID]:
    # Non-UUID ids cannot name a customer; treated as not found
    try:
        return UUID(value)
    except ValueError:
        return None

# ============== Customers ==============

@router.get("", response_model=ApiResponse[List[CustomerResponse]])
def list_customers(service: CustomerService = Depends(get_customer_service)):
    """List active customers"""
    return ApiResponse[List[CustomerResponse]].ok(service.list_active())

@router.get("/email/{email}", response_model=ApiResponse[CustomerResponse])
def get_customer_by_email(email: str, service: CustomerService = Depends(get_customer_service)):
    customer = service.get_by_email(email)
    if not customer:
        return fail(404, f"Customer with email {email} not found")
    return ApiResponse[CustomerResponse].ok(customer)

@router.get("/{customer_id}", response_model=ApiResponse[CustomerResponse])
def get_customer(customer_id: str, service: CustomerService = Depends(get_customer_service)):
    cid = parse_id(customer_id)
    customer = service.get_by_id(cid) if cid else None
    if not customer:
        return fail(404, f"Customer {customer_id} not found")
    return ApiResponse[CustomerResponse].ok(customer)

@router.post("", status_code=201, response_model=ApiResponse[CustomerResponse])
def create_customer(
    data: CustomerCreate,
    request: Request,
    response: Response,
    service: CustomerService = Depends(get_customer_service),
):
    try:
        customer = service.create(data)
    except ConflictError:
        logger.exception("Error creating customer")
        return fail(400, "Customer could not be created")

    response.headers["Location"] = str(request.url_for("get_customer", customer_id=str(customer.id)))
    return ApiResponse[CustomerResponse].ok(customer, "Customer created successfully")

@router.put("/{customer_id}", response_model=ApiResponse[CustomerResponse])
def update_customer(
    customer_id: str,
    data: CustomerUpdate,
    service: CustomerService = Depends(get_customer_service),
):
    cid = parse_id(customer_id)
    try:
        customer = service.update(cid, data) if cid else None
    except ConflictError:
        logger.exception(f"Error updating customer {customer_id}")
        return fail(400, "Customer could not be updated")

    if not customer:
        return fail(404, f"Customer {customer_id} not found")
    return ApiResponse[CustomerResponse].ok(customer, "Customer updated successfully")

@router.delete("/{customer_id}", response_model=ApiResponse[dict])
def delete_customer(customer_id: str, service: CustomerService = Depends(get_customer_service)):
    cid = parse_id(customer_id)
    if not cid or not service.delete(cid):
        return fail(404, f"Customer {customer_id} not found")
    return ApiResponse[dict].ok({"id": str(cid)}, "Customer deleted successfully")

# ============== Credit History ==============

@router.get("/{customer_id}/credit", response_model=ApiResponse[CreditResponse])
def get_credit_history(customer_id: str, service: CustomerService = Depends(get_customer_service)):
    cid = parse_id(customer_id)
    credit = service.get_credit_history(cid) if cid else None
    if not credit:
        return fail(404, f"Credit history for customer {customer_id} not found")
    return ApiResponse[CreditResponse].ok(credit)

@router.put("/{customer_id}/credit", response_model=ApiResponse[CreditResponse])
def update_credit_history(
    customer_id: str,
    data: CreditUpdate,
    service: CustomerService = Depends(get_customer_service),
):
    cid = parse_id(customer_id)
    if not cid:
        return fail(404, f"Customer {customer_id} not found")
    credit = service.upsert_credit_history(cid, data)
    return ApiResponse[CreditResponse].ok(credit, "Credit history updated")

# ============== Employments ==============

@router.get("/{customer_id}/employments", response_model=ApiResponse[List[EmploymentResponse]])
def list_employments(customer_id: str, service: CustomerService = Depends(get_customer_service)):
    cid = parse_id(customer_id)
    employments = service.list_employments(cid) if cid else []
    return ApiResponse[List[EmploymentResponse]].ok(employments)

@router.post("/{customer_id}/employments", status_code=201, response_model=ApiResponse[EmploymentResponse])
def add_employment(
    customer_id: str,
    data: EmploymentCreate,
    request: Request,
    response: Response,
    service: CustomerService = Depends(get_customer_service),
):
    cid = parse_id(customer_id)
    if not cid:
        return fail(404, f"Customer {customer_id} not found")
    employment = service.add_employment(cid, data)

    response.headers["Location"] = str(request.url_for("list_employments", customer_id=str(cid)))
    return ApiResponse[EmploymentResponse].ok(employment, "Employment added")
