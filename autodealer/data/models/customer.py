# autodealer/data/models/customer.py
import uuid

from sqlalchemy import Column, String, DateTime, Index, text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from autodealer.data.database import Base


class CustomerModel(Base):
    __tablename__ = "customers"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, server_default=text("gen_random_uuid()"))
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False, unique=True)
    phone = Column(String(50), nullable=False)

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    purchase_requests = relationship(
        "PurchaseRequestModel",
        back_populates="customer",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        Index("idx_customers_email", "email"),
        Index("idx_customers_name", "first_name", "last_name"),
    )

    def __repr__(self):
        return f"<Customer {self.first_name} {self.last_name} ({self.email})>"
