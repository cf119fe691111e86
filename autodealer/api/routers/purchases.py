# autodealer/api/routers/purchases.py
from typing import List
from uuid import UUID

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from autodealer.data.database import get_db
from autodealer.domain.enums import RequestStatus
from autodealer.domain.schemas import PurchaseRequestCreate, PurchaseRequestOut
from autodealer.services.purchase_service import PurchaseService

router = APIRouter(prefix="/api/purchases", tags=["purchases"])


def get_service(db: Session):
    return PurchaseService(db)


@router.get("/", response_model=List[PurchaseRequestOut])
def list_purchases(
    skip: int = Query(default=0, ge=0),
    limit: int = Query(default=100, ge=1, le=1000),
    db: Session = Depends(get_db),
):
    return get_service(db).list_requests(skip=skip, limit=limit)


@router.post("/", response_model=PurchaseRequestOut, status_code=status.HTTP_201_CREATED)
def create_purchase(payload: PurchaseRequestCreate, db: Session = Depends(get_db)):
    """
    Creates a Pending request, car and customer must exist and the customer
    must not already have a Pending request for this car.
    """
    try:
        return get_service(db).create_request(payload)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/customer/{customer_id}", response_model=List[PurchaseRequestOut])
def list_purchases_by_customer(customer_id: UUID, db: Session = Depends(get_db)):
    return get_service(db).list_by_customer(customer_id)


@router.get("/car/{car_id}", response_model=List[PurchaseRequestOut])
def list_purchases_by_car(car_id: UUID, db: Session = Depends(get_db)):
    return get_service(db).list_by_car(car_id)


@router.get("/status/{request_status}", response_model=List[PurchaseRequestOut])
def list_purchases_by_status(request_status: RequestStatus, db: Session = Depends(get_db)):
    return get_service(db).list_by_status(request_status)


@router.get("/{request_id}", response_model=PurchaseRequestOut)
def get_purchase(request_id: UUID, db: Session = Depends(get_db)):
    try:
        return get_service(db).get_request(request_id)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.patch("/{request_id}/status", response_model=PurchaseRequestOut)
def update_purchase_status(
    request_id: UUID,
    new_status: RequestStatus = Body(..., description='Bare JSON string, e.g. "Approved"'),
    db: Session = Depends(get_db),
):
    try:
        return get_service(db).update_status(request_id, new_status)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.delete("/{request_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_purchase(request_id: UUID, db: Session = Depends(get_db)):
    try:
        get_service(db).delete_request(request_id)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
