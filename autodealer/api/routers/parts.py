# autodealer/api/routers/parts.py
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from autodealer.data.database import get_db
from autodealer.domain.schemas import PartCreate, PartUpdate, PartOut
from autodealer.services.part_service import PartService

router = APIRouter(prefix="/api/parts", tags=["parts"])


def get_service(db: Session):
    return PartService(db)


@router.get("/", response_model=List[PartOut])
def list_parts(
    skip: int = Query(default=0, ge=0),
    limit: int = Query(default=100, ge=1, le=1000),
    db: Session = Depends(get_db),
):
    return get_service(db).list_parts(skip=skip, limit=limit)


@router.post("/", response_model=PartOut, status_code=status.HTTP_201_CREATED)
def create_part(payload: PartCreate, db: Session = Depends(get_db)):
    try:
        return get_service(db).create_part(payload)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/article/{article}", response_model=PartOut)
def get_part_by_article(article: str, db: Session = Depends(get_db)):
    try:
        return get_service(db).get_by_article(article)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/brand/{brand_id}", response_model=List[PartOut])
def list_parts_by_brand(brand_id: UUID, db: Session = Depends(get_db)):
    return get_service(db).list_by_brand(brand_id)


@router.get("/car-model/{car_model_id}", response_model=List[PartOut])
def list_parts_by_car_model(car_model_id: UUID, db: Session = Depends(get_db)):
    return get_service(db).list_by_car_model(car_model_id)


@router.get("/vin/{vin}", response_model=List[PartOut])
def list_parts_by_vin(vin: str, db: Session = Depends(get_db)):
    """
    Parts whose compatible_vins contain the VIN.
    """
    return get_service(db).list_by_vin(vin)


@router.get("/{part_id}", response_model=PartOut)
def get_part(part_id: UUID, db: Session = Depends(get_db)):
    try:
        return get_service(db).get_part(part_id)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.put("/{part_id}", response_model=PartOut)
def update_part(part_id: UUID, payload: PartUpdate, db: Session = Depends(get_db)):
    try:
        return get_service(db).update_part(part_id, payload)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.delete("/{part_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_part(part_id: UUID, db: Session = Depends(get_db)):
    try:
        get_service(db).delete_part(part_id)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
