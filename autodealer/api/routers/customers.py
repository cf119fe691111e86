# autodealer/api/routers/customers.py
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from autodealer.data.database import get_db
from autodealer.domain.schemas import CustomerCreate, CustomerUpdate, CustomerOut
from autodealer.services.customer_service import CustomerService

router = APIRouter(prefix="/api/customers", tags=["customers"])


def get_service(db: Session):
    return CustomerService(db)


@router.get("/", response_model=List[CustomerOut])
def list_customers(
    skip: int = Query(default=0, ge=0),
    limit: int = Query(default=100, ge=1, le=1000),
    db: Session = Depends(get_db),
):
    return get_service(db).list_customers(skip=skip, limit=limit)


@router.post("/", response_model=CustomerOut, status_code=status.HTTP_201_CREATED)
def create_customer(payload: CustomerCreate, db: Session = Depends(get_db)):
    try:
        return get_service(db).create_customer(payload)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/{customer_id}", response_model=CustomerOut)
def get_customer(customer_id: UUID, db: Session = Depends(get_db)):
    try:
        return get_service(db).get_customer(customer_id)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.put("/{customer_id}", response_model=CustomerOut)
def update_customer(customer_id: UUID, payload: CustomerUpdate, db: Session = Depends(get_db)):
    try:
        return get_service(db).update_customer(customer_id, payload)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_customer(customer_id: UUID, db: Session = Depends(get_db)):
    try:
        get_service(db).delete_customer(customer_id)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
