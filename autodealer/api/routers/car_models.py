# autodealer/api/routers/car_models.py
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from autodealer.data.database import get_db
from autodealer.domain.schemas import CarModelCreate, CarModelUpdate, CarModelOut
from autodealer.services.car_model_service import CarModelService

router = APIRouter(prefix="/api/car-models", tags=["car-models"])


def get_service(db: Session):
    return CarModelService(db)


@router.get("/", response_model=List[CarModelOut])
def list_car_models(db: Session = Depends(get_db)):
    return get_service(db).list_models()


@router.post("/", response_model=CarModelOut, status_code=status.HTTP_201_CREATED)
def create_car_model(payload: CarModelCreate, db: Session = Depends(get_db)):
    try:
        return get_service(db).create_model(payload)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/brand/{brand_id}", response_model=List[CarModelOut])
def list_car_models_by_brand(brand_id: UUID, db: Session = Depends(get_db)):
    return get_service(db).list_by_brand(brand_id)


@router.get("/name/{name}", response_model=List[CarModelOut])
def list_car_models_by_name(name: str, db: Session = Depends(get_db)):
    return get_service(db).list_by_name(name)


@router.get("/{model_id}", response_model=CarModelOut)
def get_car_model(model_id: UUID, db: Session = Depends(get_db)):
    try:
        return get_service(db).get_model(model_id)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.put("/{model_id}", response_model=CarModelOut)
def update_car_model(model_id: UUID, payload: CarModelUpdate, db: Session = Depends(get_db)):
    try:
        return get_service(db).update_model(model_id, payload)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.delete("/{model_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_car_model(model_id: UUID, db: Session = Depends(get_db)):
    try:
        get_service(db).delete_model(model_id)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
