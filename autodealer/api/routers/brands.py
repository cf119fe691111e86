# autodealer/api/routers/brands.py
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from autodealer.data.database import get_db
from autodealer.domain.schemas import BrandCreate, BrandUpdate, BrandOut
from autodealer.services.brand_service import BrandService

router = APIRouter(prefix="/api/brands", tags=["brands"])


def get_service(db: Session):
    return BrandService(db)


@router.get("/", response_model=List[BrandOut])
def list_brands(db: Session = Depends(get_db)):
    return get_service(db).list_brands()


@router.post("/", response_model=BrandOut, status_code=status.HTTP_201_CREATED)
def create_brand(payload: BrandCreate, db: Session = Depends(get_db)):
    try:
        return get_service(db).create_brand(payload)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/name/{name}", response_model=BrandOut)
def get_brand_by_name(name: str, db: Session = Depends(get_db)):
    try:
        return get_service(db).get_by_name(name)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/country/{country}", response_model=List[BrandOut])
def list_brands_by_country(country: str, db: Session = Depends(get_db)):
    return get_service(db).list_by_country(country)


@router.get("/{brand_id}", response_model=BrandOut)
def get_brand(brand_id: UUID, db: Session = Depends(get_db)):
    try:
        return get_service(db).get_brand(brand_id)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.put("/{brand_id}", response_model=BrandOut)
def update_brand(brand_id: UUID, payload: BrandUpdate, db: Session = Depends(get_db)):
    try:
        return get_service(db).update_brand(brand_id, payload)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.delete("/{brand_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_brand(brand_id: UUID, db: Session = Depends(get_db)):
    """
    Deletes the brand, its car models go with it (ON DELETE CASCADE).
    """
    try:
        get_service(db).delete_brand(brand_id)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
