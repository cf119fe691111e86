# autodealer/api/routers/cars.py
from typing import List
from uuid import UUID

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from autodealer.data.database import get_db
from autodealer.domain.enums import CarStatus
from autodealer.domain.schemas import CarCreate, CarUpdate, CarOut
from autodealer.services.car_service import CarService

router = APIRouter(prefix="/api/cars", tags=["cars"])


def get_service(db: Session):
    return CarService(db)


@router.get("/", response_model=List[CarOut])
def list_cars(
    skip: int = Query(default=0, ge=0),
    limit: int = Query(default=100, ge=1, le=1000),
    db: Session = Depends(get_db),
):
    return get_service(db).list_cars(skip=skip, limit=limit)


@router.post("/", response_model=CarOut, status_code=status.HTTP_201_CREATED)
def create_car(payload: CarCreate, db: Session = Depends(get_db)):
    try:
        return get_service(db).create_car(payload)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/status/{car_status}", response_model=List[CarOut])
def list_cars_by_status(car_status: CarStatus, db: Session = Depends(get_db)):
    return get_service(db).list_by_status(car_status)


@router.get("/vin/{vin}", response_model=CarOut)
def get_car_by_vin(vin: str, db: Session = Depends(get_db)):
    try:
        return get_service(db).get_by_vin(vin)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/brand/{brand_id}", response_model=List[CarOut])
def list_cars_by_brand(brand_id: UUID, db: Session = Depends(get_db)):
    return get_service(db).list_by_brand(brand_id)


@router.get("/model/{model_id}", response_model=List[CarOut])
def list_cars_by_model(model_id: UUID, db: Session = Depends(get_db)):
    return get_service(db).list_by_model(model_id)


@router.get("/campaign/{campaign_id}", response_model=List[CarOut])
def list_cars_by_completed_campaign(campaign_id: UUID, db: Session = Depends(get_db)):
    return get_service(db).list_by_completed_campaign(campaign_id)


@router.get("/{car_id}", response_model=CarOut)
def get_car(car_id: UUID, db: Session = Depends(get_db)):
    try:
        return get_service(db).get_car(car_id)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.put("/{car_id}", response_model=CarOut)
def update_car(car_id: UUID, payload: CarUpdate, db: Session = Depends(get_db)):
    try:
        return get_service(db).update_car(car_id, payload)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.patch("/{car_id}/status", response_model=CarOut)
def update_car_status(
    car_id: UUID,
    new_status: CarStatus = Body(..., description='Bare JSON string, e.g. "Sold"'),
    db: Session = Depends(get_db),
):
    try:
        return get_service(db).update_status(car_id, new_status)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/{car_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_car(car_id: UUID, db: Session = Depends(get_db)):
    try:
        get_service(db).delete_car(car_id)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))


#service campaigns completed on a car
@router.post("/{car_id}/campaigns/{campaign_id}", response_model=CarOut)
def add_completed_campaign(car_id: UUID, campaign_id: UUID, db: Session = Depends(get_db)):
    try:
        return get_service(db).add_completed_campaign(car_id, campaign_id)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/{car_id}/campaigns/{campaign_id}", response_model=CarOut)
def remove_completed_campaign(car_id: UUID, campaign_id: UUID, db: Session = Depends(get_db)):
    try:
        return get_service(db).remove_completed_campaign(car_id, campaign_id)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/{car_id}/campaigns", response_model=CarOut)
def clear_completed_campaigns(car_id: UUID, db: Session = Depends(get_db)):
    try:
        return get_service(db).clear_completed_campaigns(car_id)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
