# autodealer/data/models/car_model.py
import uuid

from sqlalchemy import Column, String, DateTime, ForeignKey, Index, UniqueConstraint, text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from autodealer.data.database import Base


class CarModelModel(Base):
    """Model line of a brand, e.g. Toyota / Camry."""

    __tablename__ = "car_models"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, server_default=text("gen_random_uuid()"))
    name = Column(String(100), nullable=False)
    brand_id = Column(UUID(as_uuid=True), ForeignKey("brands.id", ondelete="CASCADE"), nullable=False)

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    brand = relationship("BrandModel", back_populates="car_models")

    __table_args__ = (
        UniqueConstraint("brand_id", "name", name="car_models_brand_id_name_key"),
        Index("idx_car_models_brand_id", "brand_id"),
        Index("idx_car_models_name", "name"),
    )
