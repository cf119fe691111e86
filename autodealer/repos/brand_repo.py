# autodealer/repos/brand_repo.py
from typing import List

from sqlalchemy import select

from autodealer.data.models.brand import BrandModel
from autodealer.repos.base_repo import BaseRepo


class BrandRepo(BaseRepo):
    model = BrandModel

    def list_brands(self) -> List[BrandModel]:
        return self.db.execute(
            select(BrandModel).order_by(BrandModel.name)
        ).scalars().all()

    def get_by_name(self, name: str) -> BrandModel | None:
        return self.db.execute(
            select(BrandModel).where(BrandModel.name == name)
        ).scalar_one_or_none()

    def list_by_country(self, country: str) -> List[BrandModel]:
        return self.db.execute(
            select(BrandModel)
            .where(BrandModel.country.ilike(country))
            .order_by(BrandModel.name)
        ).scalars().all()
