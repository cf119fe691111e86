# autodealer/data/models/part.py
import uuid

from sqlalchemy import Column, Float, String, DateTime, ForeignKey, CheckConstraint, Index, Text, text
from sqlalchemy.dialects.postgresql import UUID, ARRAY
from sqlalchemy.sql import func

from autodealer.data.database import Base


class PartModel(Base):
    __tablename__ = "parts"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, server_default=text("gen_random_uuid()"))
    article = Column(String(100), nullable=False, unique=True)
    name = Column(String(200), nullable=False)
    model = Column(String(100), nullable=False)

    purchase_price = Column(Float, nullable=False)
    sale_price = Column(Float, nullable=False)

    compatible_vins = Column(ARRAY(Text), nullable=False, default=list, server_default=text("'{}'"))

    brand_id = Column(UUID(as_uuid=True), ForeignKey("brands.id"), nullable=True)
    car_model_id = Column(UUID(as_uuid=True), ForeignKey("car_models.id"), nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    __table_args__ = (
        CheckConstraint("purchase_price >= 0", name="parts_purchase_price_check"),
        CheckConstraint("sale_price >= 0", name="parts_sale_price_check"),
        Index("idx_parts_article", "article"),
        Index("idx_parts_model", "model"),
        Index("idx_parts_created_at", created_at.desc()),
        Index("idx_parts_brand_id", "brand_id"),
        Index("idx_parts_car_model_id", "car_model_id"),
        Index("idx_parts_compatible_vins", "compatible_vins", postgresql_using="gin"),
    )
