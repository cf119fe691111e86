# autodealer/services/brand_service.py
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from autodealer.data.models.brand import BrandModel
from autodealer.domain.schemas import BrandCreate, BrandUpdate
from autodealer.repos.brand_repo import BrandRepo
from autodealer.utils.logging import get_logger

logger = get_logger(__name__)


class BrandService:
    def __init__(self, db: Session):
        self.repo = BrandRepo(db)

    def list_brands(self):
        return self.repo.list_brands()

    def get_brand(self, brand_id: UUID) -> BrandModel:
        brand = self.repo.get(brand_id)
        if not brand:
            raise LookupError("Brand not found")
        return brand

    def get_by_name(self, name: str) -> BrandModel:
        brand = self.repo.get_by_name(name)
        if not brand:
            raise LookupError("Brand not found")
        return brand

    def list_by_country(self, country: str):
        return self.repo.list_by_country(country)

    def create_brand(self, payload: BrandCreate) -> BrandModel:
        if self.repo.get_by_name(payload.name):
            raise ValueError("Brand name already exists")

        try:
            created = self.repo.add(BrandModel(**payload.model_dump()))
        except IntegrityError as e:
            self.repo.rollback()
            raise ValueError("Brand name already exists") from e

        logger.info(f"Created brand {created.id} ({created.name})")
        return created

    def update_brand(self, brand_id: UUID, payload: BrandUpdate) -> BrandModel:
        brand = self.get_brand(brand_id)
        data = payload.model_dump(exclude_unset=True, exclude_none=True)

        new_name = data.get("name")
        if new_name and new_name != brand.name and self.repo.get_by_name(new_name):
            raise ValueError("Brand name already exists")

        for field, value in data.items():
            setattr(brand, field, value)

        try:
            return self.repo.save(brand)
        except IntegrityError as e:
            self.repo.rollback()
            raise ValueError("Brand name already exists") from e

    def delete_brand(self, brand_id: UUID) -> None:
        brand = self.get_brand(brand_id)
        try:
            self.repo.delete(brand)
        except IntegrityError as e:
            #cars and parts reference brands without cascade
            self.repo.rollback()
            raise ValueError("Brand is still referenced by cars or parts") from e

        logger.info(f"Deleted brand {brand_id} with its car models")
