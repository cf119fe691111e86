# autodealer/data/models/purchase_request.py
import uuid

from sqlalchemy import Column, Float, String, Text, DateTime, ForeignKey, CheckConstraint, Index, text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from autodealer.data.database import Base
from autodealer.domain.enums import RequestStatus, sql_in


class PurchaseRequestModel(Base):
    """
    Join between a car and a customer with its own lifecycle
    (Pending -> Approved / Rejected -> Completed).
    """

    __tablename__ = "purchase_requests"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, server_default=text("gen_random_uuid()"))
    car_id = Column(UUID(as_uuid=True), ForeignKey("cars.id", ondelete="CASCADE"), nullable=False)
    customer_id = Column(UUID(as_uuid=True), ForeignKey("customers.id", ondelete="CASCADE"), nullable=False)

    status = Column(
        String(20),
        nullable=False,
        default=RequestStatus.PENDING.value,
        server_default=RequestStatus.PENDING.value,
    )
    offer_price = Column(Float, nullable=True)
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    car = relationship("CarModel", back_populates="purchase_requests")
    customer = relationship("CustomerModel", back_populates="purchase_requests")

    __table_args__ = (
        CheckConstraint(sql_in("status", RequestStatus), name="purchase_requests_status_check"),
        CheckConstraint("offer_price >= 0", name="purchase_requests_offer_price_check"),
        Index("idx_purchase_requests_customer_id", "customer_id"),
        Index("idx_purchase_requests_car_id", "car_id"),
        Index("idx_purchase_requests_status", "status"),
        Index("idx_purchase_requests_created_at", created_at.desc()),
        #one Pending request per customer per car
        Index(
            "idx_purchase_requests_car_customer_pending",
            "car_id",
            "customer_id",
            unique=True,
            postgresql_where=text("status = 'Pending'"),
        ),
    )
