# autodealer/repos/purchase_repo.py
from typing import List
from uuid import UUID

from sqlalchemy import select

from autodealer.data.models.purchase_request import PurchaseRequestModel
from autodealer.domain.enums import RequestStatus
from autodealer.repos.base_repo import BaseRepo


class PurchaseRepo(BaseRepo):
    model = PurchaseRequestModel

    def list_requests(self, skip: int = 0, limit: int = 100) -> List[PurchaseRequestModel]:
        return self.db.execute(
            select(PurchaseRequestModel)
            .order_by(PurchaseRequestModel.created_at.desc())
            .offset(skip)
            .limit(limit)
        ).scalars().all()

    def list_by_customer(self, customer_id: UUID) -> List[PurchaseRequestModel]:
        return self.db.execute(
            select(PurchaseRequestModel)
            .where(PurchaseRequestModel.customer_id == customer_id)
            .order_by(PurchaseRequestModel.created_at.desc())
        ).scalars().all()

    def list_by_car(self, car_id: UUID) -> List[PurchaseRequestModel]:
        return self.db.execute(
            select(PurchaseRequestModel)
            .where(PurchaseRequestModel.car_id == car_id)
            .order_by(PurchaseRequestModel.created_at.desc())
        ).scalars().all()

    def list_by_status(self, status: str) -> List[PurchaseRequestModel]:
        return self.db.execute(
            select(PurchaseRequestModel)
            .where(PurchaseRequestModel.status == status)
            .order_by(PurchaseRequestModel.created_at.desc())
        ).scalars().all()

    def get_pending(self, car_id: UUID, customer_id: UUID) -> PurchaseRequestModel | None:
        return self.db.execute(
            select(PurchaseRequestModel).where(
                PurchaseRequestModel.car_id == car_id,
                PurchaseRequestModel.customer_id == customer_id,
                PurchaseRequestModel.status == RequestStatus.PENDING.value,
            )
        ).scalar_one_or_none()
