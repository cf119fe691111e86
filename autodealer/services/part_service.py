# autodealer/services/part_service.py
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from autodealer.data.models.part import PartModel
from autodealer.domain.schemas import PartCreate, PartUpdate
from autodealer.repos.brand_repo import BrandRepo
from autodealer.repos.car_model_repo import CarModelRepo
from autodealer.repos.part_repo import PartRepo
from autodealer.utils.logging import get_logger

logger = get_logger(__name__)


class PartService:
    """
    Spare parts catalogue, a part lists the VINs it fits.
    """

    def __init__(self, db: Session):
        self.repo = PartRepo(db)
        self.brand_repo = BrandRepo(db)
        self.car_model_repo = CarModelRepo(db)

    def list_parts(self, skip: int = 0, limit: int = 100):
        return self.repo.list_parts(skip=skip, limit=limit)

    def get_part(self, part_id: UUID) -> PartModel:
        part = self.repo.get(part_id)
        if not part:
            raise LookupError("Part not found")
        return part

    def get_by_article(self, article: str) -> PartModel:
        part = self.repo.get_by_article(article)
        if not part:
            raise LookupError("Part not found")
        return part

    def list_by_brand(self, brand_id: UUID):
        return self.repo.list_by_brand(brand_id)

    def list_by_car_model(self, car_model_id: UUID):
        return self.repo.list_by_car_model(car_model_id)

    def list_by_vin(self, vin: str):
        return self.repo.list_by_vin(vin)

    def create_part(self, payload: PartCreate) -> PartModel:
        data = payload.model_dump()
        self._check_references(data.get("brand_id"), data.get("car_model_id"))

        if self.repo.get_by_article(data["article"]):
            raise ValueError("Article already exists")

        data["compatible_vins"] = list(dict.fromkeys(data["compatible_vins"]))

        try:
            created = self.repo.add(PartModel(**data))
        except IntegrityError as e:
            self.repo.rollback()
            logger.warning(f"Part insert rejected by the database: {e.orig}")
            raise ValueError("Part violates a database constraint") from e

        logger.info(f"Created part {created.id} ({created.article})")
        return created

    def update_part(self, part_id: UUID, payload: PartUpdate) -> PartModel:
        part = self.get_part(part_id)
        data = payload.model_dump(exclude_unset=True, exclude_none=True)

        if "brand_id" in data or "car_model_id" in data:
            self._check_references(data.get("brand_id"), data.get("car_model_id"))

        new_article = data.get("article")
        if new_article and new_article != part.article and self.repo.get_by_article(new_article):
            raise ValueError("Article already exists")

        if "compatible_vins" in data:
            data["compatible_vins"] = list(dict.fromkeys(data["compatible_vins"]))

        for field, value in data.items():
            setattr(part, field, value)

        try:
            return self.repo.save(part)
        except IntegrityError as e:
            self.repo.rollback()
            logger.warning(f"Part {part_id} update rejected by the database: {e.orig}")
            raise ValueError("Part violates a database constraint") from e

    def delete_part(self, part_id: UUID) -> None:
        part = self.get_part(part_id)
        self.repo.delete(part)
        logger.info(f"Deleted part {part_id}")

    def _check_references(self, brand_id: UUID | None, car_model_id: UUID | None) -> None:
        if brand_id and not self.brand_repo.get(brand_id):
            raise ValueError("Brand not found")
        if car_model_id and not self.car_model_repo.get(car_model_id):
            raise ValueError("Car model not found")
