# autodealer/domain/schemas.py
from datetime import datetime
from typing import List
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from autodealer.domain.constants import MIN_YEAR, MAX_YEAR, VIN_LENGTH
from autodealer.domain.enums import FuelType, Transmission, CarStatus, RequestStatus


class _In(BaseModel):
    """Base for request bodies, enums are kept as their stored string."""

    model_config = ConfigDict(use_enum_values=True, str_strip_whitespace=True)


class _Out(BaseModel):
    model_config = ConfigDict(from_attributes=True)


# =====================================================
# BRANDS
# =====================================================
class BrandCreate(_In):
    name: str = Field(..., min_length=1, max_length=100)
    country: str = Field(..., max_length=100)


class BrandUpdate(_In):
    name: str | None = Field(None, min_length=1, max_length=100)
    country: str | None = Field(None, max_length=100)


class BrandOut(_Out):
    id: UUID
    name: str
    country: str
    created_at: datetime
    updated_at: datetime


# =====================================================
# CAR MODELS
# =====================================================
class CarModelCreate(_In):
    name: str = Field(..., min_length=1, max_length=100)
    brand_id: UUID


class CarModelUpdate(_In):
    name: str | None = Field(None, min_length=1, max_length=100)
    brand_id: UUID | None = None


class CarModelOut(_Out):
    id: UUID
    name: str
    brand_id: UUID
    created_at: datetime
    updated_at: datetime


# =====================================================
# CARS
# =====================================================
class CarCreate(_In):
    brand: str = Field(..., min_length=1, max_length=100)
    model: str = Field(..., min_length=1, max_length=100)
    year: int = Field(..., ge=MIN_YEAR, le=MAX_YEAR)
    price: float = Field(..., ge=0)
    mileage: int = Field(..., ge=0)
    color: str = Field(..., min_length=1, max_length=50)
    fuel_type: FuelType
    transmission: Transmission
    vin: str | None = Field(None, min_length=VIN_LENGTH, max_length=VIN_LENGTH)
    brand_id: UUID | None = None
    model_id: UUID | None = None


class CarUpdate(_In):
    brand: str | None = Field(None, min_length=1, max_length=100)
    model: str | None = Field(None, min_length=1, max_length=100)
    year: int | None = Field(None, ge=MIN_YEAR, le=MAX_YEAR)
    price: float | None = Field(None, ge=0)
    mileage: int | None = Field(None, ge=0)
    color: str | None = Field(None, min_length=1, max_length=50)
    fuel_type: FuelType | None = None
    transmission: Transmission | None = None
    status: CarStatus | None = None
    vin: str | None = Field(None, min_length=VIN_LENGTH, max_length=VIN_LENGTH)
    brand_id: UUID | None = None
    model_id: UUID | None = None
    completed_service_campaigns: List[UUID] | None = None


class CarOut(_Out):
    id: UUID
    brand: str
    model: str
    year: int
    price: float
    mileage: int
    color: str
    vin: str | None = None
    fuel_type: FuelType
    transmission: Transmission
    status: CarStatus
    brand_id: UUID | None = None
    model_id: UUID | None = None
    completed_service_campaigns: List[UUID] = []
    created_at: datetime
    updated_at: datetime


# =====================================================
# CUSTOMERS
# =====================================================
class CustomerCreate(_In):
    first_name: str = Field(..., min_length=2, max_length=100)
    last_name: str = Field(..., min_length=2, max_length=100)
    email: EmailStr
    phone: str = Field(..., min_length=1, max_length=50)


class CustomerUpdate(_In):
    first_name: str | None = Field(None, min_length=2, max_length=100)
    last_name: str | None = Field(None, min_length=2, max_length=100)
    email: EmailStr | None = None
    phone: str | None = Field(None, min_length=1, max_length=50)


class CustomerOut(_Out):
    id: UUID
    first_name: str
    last_name: str
    email: str
    phone: str
    created_at: datetime


# =====================================================
# PURCHASE REQUESTS
# =====================================================
class PurchaseRequestCreate(_In):
    car_id: UUID
    customer_id: UUID
    offer_price: float | None = Field(None, ge=0)
    notes: str | None = None


class PurchaseRequestOut(_Out):
    id: UUID
    car_id: UUID
    customer_id: UUID
    status: RequestStatus
    offer_price: float | None = None
    notes: str | None = None
    created_at: datetime
    updated_at: datetime


# =====================================================
# PARTS
# =====================================================
class PartCreate(_In):
    article: str = Field(..., min_length=1, max_length=100)
    name: str = Field(..., min_length=1, max_length=200)
    model: str = Field(..., min_length=1, max_length=100)
    purchase_price: float = Field(..., ge=0)
    sale_price: float = Field(..., ge=0)
    compatible_vins: List[str] = []
    brand_id: UUID | None = None
    car_model_id: UUID | None = None


class PartUpdate(_In):
    article: str | None = Field(None, min_length=1, max_length=100)
    name: str | None = Field(None, min_length=1, max_length=200)
    model: str | None = Field(None, min_length=1, max_length=100)
    purchase_price: float | None = Field(None, ge=0)
    sale_price: float | None = Field(None, ge=0)
    compatible_vins: List[str] | None = None
    brand_id: UUID | None = None
    car_model_id: UUID | None = None


class PartOut(_Out):
    id: UUID
    article: str
    name: str
    model: str
    purchase_price: float
    sale_price: float
    compatible_vins: List[str] = []
    brand_id: UUID | None = None
    car_model_id: UUID | None = None
    created_at: datetime
    updated_at: datetime
