# autodealer/services/car_model_service.py
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from autodealer.data.models.car_model import CarModelModel
from autodealer.domain.schemas import CarModelCreate, CarModelUpdate
from autodealer.repos.brand_repo import BrandRepo
from autodealer.repos.car_model_repo import CarModelRepo
from autodealer.utils.logging import get_logger

logger = get_logger(__name__)

DUPLICATE_MSG = "Car model with this name already exists for this brand"


class CarModelService:
    def __init__(self, db: Session):
        self.repo = CarModelRepo(db)
        self.brand_repo = BrandRepo(db)

    def list_models(self):
        return self.repo.list_models()

    def get_model(self, model_id: UUID) -> CarModelModel:
        car_model = self.repo.get(model_id)
        if not car_model:
            raise LookupError("Car model not found")
        return car_model

    def list_by_brand(self, brand_id: UUID):
        return self.repo.list_by_brand(brand_id)

    def list_by_name(self, name: str):
        return self.repo.list_by_name(name)

    def create_model(self, payload: CarModelCreate) -> CarModelModel:
        if not self.brand_repo.get(payload.brand_id):
            raise ValueError("Brand not found")

        if self.repo.get_by_brand_and_name(payload.brand_id, payload.name):
            raise ValueError(DUPLICATE_MSG)

        try:
            created = self.repo.add(CarModelModel(**payload.model_dump()))
        except IntegrityError as e:
            self.repo.rollback()
            raise ValueError(DUPLICATE_MSG) from e

        logger.info(f"Created car model {created.id} ({created.name}) for brand {created.brand_id}")
        return created

    def update_model(self, model_id: UUID, payload: CarModelUpdate) -> CarModelModel:
        car_model = self.get_model(model_id)
        data = payload.model_dump(exclude_unset=True, exclude_none=True)

        new_brand_id = data.get("brand_id") or car_model.brand_id
        new_name = data.get("name") or car_model.name

        if "brand_id" in data and not self.brand_repo.get(new_brand_id):
            raise ValueError("Brand not found")

        #check the pair only when it actually changes
        if (new_brand_id, new_name) != (car_model.brand_id, car_model.name):
            if self.repo.get_by_brand_and_name(new_brand_id, new_name):
                raise ValueError(DUPLICATE_MSG)

        for field, value in data.items():
            setattr(car_model, field, value)

        try:
            return self.repo.save(car_model)
        except IntegrityError as e:
            self.repo.rollback()
            raise ValueError(DUPLICATE_MSG) from e

    def delete_model(self, model_id: UUID) -> None:
        car_model = self.get_model(model_id)
        try:
            self.repo.delete(car_model)
        except IntegrityError as e:
            self.repo.rollback()
            raise ValueError("Car model is still referenced by cars or parts") from e
        logger.info(f"Deleted car model {model_id}")
