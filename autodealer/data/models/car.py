# autodealer/data/models/car.py
import uuid

from sqlalchemy import Column, Integer, Float, String, DateTime, ForeignKey, CheckConstraint, Index, text
from sqlalchemy.dialects.postgresql import UUID, ARRAY
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from autodealer.data.database import Base
from autodealer.domain.enums import FuelType, Transmission, CarStatus, sql_in
from autodealer.domain.constants import MIN_YEAR, MAX_YEAR


class CarModel(Base):
    __tablename__ = "cars"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, server_default=text("gen_random_uuid()"))
    brand = Column(String(100), nullable=False)
    model = Column(String(100), nullable=False)
    year = Column(Integer, nullable=False)
    price = Column(Float, nullable=False)
    mileage = Column(Integer, nullable=False)
    color = Column(String(50), nullable=False)
    vin = Column(String(17), nullable=True, unique=True)

    fuel_type = Column(String(20), nullable=False)
    transmission = Column(String(20), nullable=False)
    status = Column(
        String(20),
        nullable=False,
        default=CarStatus.AVAILABLE.value,
        server_default=CarStatus.AVAILABLE.value,
    )

    brand_id = Column(UUID(as_uuid=True), ForeignKey("brands.id"), nullable=True)
    model_id = Column(UUID(as_uuid=True), ForeignKey("car_models.id"), nullable=True)

    completed_service_campaigns = Column(
        ARRAY(UUID(as_uuid=True)),
        nullable=False,
        default=list,
        server_default=text("'{}'"),
        comment="IDs of the service campaigns already completed on this car",
    )

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    purchase_requests = relationship(
        "PurchaseRequestModel",
        back_populates="car",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        CheckConstraint(f"year >= {MIN_YEAR} AND year <= {MAX_YEAR}", name="cars_year_check"),
        CheckConstraint("price >= 0", name="cars_price_check"),
        CheckConstraint("mileage >= 0", name="cars_mileage_check"),
        CheckConstraint(sql_in("fuel_type", FuelType), name="cars_fuel_type_check"),
        CheckConstraint(sql_in("transmission", Transmission), name="cars_transmission_check"),
        CheckConstraint(sql_in("status", CarStatus), name="cars_status_check"),
        Index("idx_cars_brand_model", "brand", "model"),
        Index("idx_cars_status", "status"),
        Index("idx_cars_price", "price"),
        Index("idx_cars_created_at", created_at.desc()),
        Index("idx_cars_brand_id", "brand_id"),
        Index("idx_cars_model_id", "model_id"),
        Index("idx_cars_completed_campaigns", "completed_service_campaigns", postgresql_using="gin"),
    )

    def __repr__(self):
        return f"<Car {self.brand} {self.model} {self.year} ({self.status})>"
