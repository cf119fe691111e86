# autodealer/repos/car_model_repo.py
from typing import List
from uuid import UUID

from sqlalchemy import select

from autodealer.data.models.car_model import CarModelModel
from autodealer.repos.base_repo import BaseRepo


class CarModelRepo(BaseRepo):
    model = CarModelModel

    def list_models(self) -> List[CarModelModel]:
        return self.db.execute(
            select(CarModelModel).order_by(CarModelModel.name)
        ).scalars().all()

    def list_by_brand(self, brand_id: UUID) -> List[CarModelModel]:
        return self.db.execute(
            select(CarModelModel)
            .where(CarModelModel.brand_id == brand_id)
            .order_by(CarModelModel.name)
        ).scalars().all()

    def list_by_name(self, name: str) -> List[CarModelModel]:
        return self.db.execute(
            select(CarModelModel)
            .where(CarModelModel.name.ilike(name))
            .order_by(CarModelModel.name)
        ).scalars().all()

    def get_by_brand_and_name(self, brand_id: UUID, name: str) -> CarModelModel | None:
        return self.db.execute(
            select(CarModelModel).where(
                CarModelModel.brand_id == brand_id,
                CarModelModel.name == name,
            )
        ).scalar_one_or_none()
