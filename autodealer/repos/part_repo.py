# autodealer/repos/part_repo.py
from typing import List
from uuid import UUID

from sqlalchemy import select

from autodealer.data.models.part import PartModel
from autodealer.repos.base_repo import BaseRepo


class PartRepo(BaseRepo):
    model = PartModel

    def list_parts(self, skip: int = 0, limit: int = 100) -> List[PartModel]:
        return self.db.execute(
            select(PartModel)
            .order_by(PartModel.created_at.desc())
            .offset(skip)
            .limit(limit)
        ).scalars().all()

    def get_by_article(self, article: str) -> PartModel | None:
        return self.db.execute(
            select(PartModel).where(PartModel.article == article)
        ).scalar_one_or_none()

    def list_by_brand(self, brand_id: UUID) -> List[PartModel]:
        return self.db.execute(
            select(PartModel)
            .where(PartModel.brand_id == brand_id)
            .order_by(PartModel.created_at.desc())
        ).scalars().all()

    def list_by_car_model(self, car_model_id: UUID) -> List[PartModel]:
        return self.db.execute(
            select(PartModel)
            .where(PartModel.car_model_id == car_model_id)
            .order_by(PartModel.created_at.desc())
        ).scalars().all()

    def list_by_vin(self, vin: str) -> List[PartModel]:
        return self.db.execute(
            select(PartModel)
            .where(PartModel.compatible_vins.contains([vin]))
            .order_by(PartModel.created_at.desc())
        ).scalars().all()
