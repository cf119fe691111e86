# autodealer/services/car_service.py
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from autodealer.data.models.car import CarModel
from autodealer.domain.enums import CarStatus
from autodealer.domain.schemas import CarCreate, CarUpdate
from autodealer.repos.brand_repo import BrandRepo
from autodealer.repos.car_model_repo import CarModelRepo
from autodealer.repos.car_repo import CarRepo
from autodealer.utils.logging import get_logger

logger = get_logger(__name__)


class CarService:
    """
    Cars in stock plus the list of service campaigns already done on each car.
    """

    def __init__(self, db: Session):
        self.repo = CarRepo(db)
        self.brand_repo = BrandRepo(db)
        self.car_model_repo = CarModelRepo(db)

    #query
    def list_cars(self, skip: int = 0, limit: int = 100):
        return self.repo.list_cars(skip=skip, limit=limit)

    def get_car(self, car_id: UUID) -> CarModel:
        car = self.repo.get(car_id)
        if not car:
            raise LookupError("Car not found")
        return car

    def get_by_vin(self, vin: str) -> CarModel:
        car = self.repo.get_by_vin(vin)
        if not car:
            raise LookupError("Car not found")
        return car

    def list_by_status(self, status: CarStatus):
        return self.repo.list_by_status(CarStatus(status).value)

    def list_by_brand(self, brand_id: UUID):
        return self.repo.list_by_brand(brand_id)

    def list_by_model(self, model_id: UUID):
        return self.repo.list_by_model(model_id)

    def list_by_completed_campaign(self, campaign_id: UUID):
        return self.repo.list_by_completed_campaign(campaign_id)

    #commands
    def create_car(self, payload: CarCreate) -> CarModel:
        data = payload.model_dump()
        self._check_references(data.get("brand_id"), data.get("model_id"))

        if data.get("vin") and self.repo.get_by_vin(data["vin"]):
            raise ValueError("Car with this VIN already exists")

        car = CarModel(
            **data,
            status=CarStatus.AVAILABLE.value,
            completed_service_campaigns=[],
        )

        try:
            created = self.repo.add(car)
        except IntegrityError as e:
            self.repo.rollback()
            logger.warning(f"Car insert rejected by the database: {e.orig}")
            raise ValueError("Car violates a database constraint") from e

        logger.info(f"Created car {created.id} ({created.brand} {created.model} {created.year})")
        return created

    def update_car(self, car_id: UUID, payload: CarUpdate) -> CarModel:
        car = self.get_car(car_id)
        data = payload.model_dump(exclude_unset=True, exclude_none=True)

        if "brand_id" in data or "model_id" in data:
            self._check_references(
                data.get("brand_id", car.brand_id),
                data.get("model_id", car.model_id),
            )

        new_vin = data.get("vin")
        if new_vin and new_vin != car.vin and self.repo.get_by_vin(new_vin):
            raise ValueError("Car with this VIN already exists")

        if "completed_service_campaigns" in data:
            data["completed_service_campaigns"] = _unique(data["completed_service_campaigns"])

        for field, value in data.items():
            setattr(car, field, value)

        try:
            return self.repo.save(car)
        except IntegrityError as e:
            self.repo.rollback()
            logger.warning(f"Car {car_id} update rejected by the database: {e.orig}")
            raise ValueError("Car violates a database constraint") from e

    def update_status(self, car_id: UUID, status: CarStatus) -> CarModel:
        car = self.get_car(car_id)
        new_status = CarStatus(status).value

        logger.info(f"Car {car_id} status {car.status} -> {new_status}")
        car.status = new_status
        return self.repo.save(car)

    def delete_car(self, car_id: UUID) -> None:
        car = self.get_car(car_id)
        self.repo.delete(car)
        logger.info(f"Deleted car {car_id} with its purchase requests")

    def add_completed_campaign(self, car_id: UUID, campaign_id: UUID) -> CarModel:
        car = self.get_car(car_id)

        #no-op when the campaign is already on the car
        if self.repo.append_completed_campaign(car_id, campaign_id):
            logger.info(f"Campaign {campaign_id} marked as completed for car {car_id}")
        return self.repo.reload(car)

    def remove_completed_campaign(self, car_id: UUID, campaign_id: UUID) -> CarModel:
        car = self.get_car(car_id)

        if self.repo.remove_completed_campaign(car_id, campaign_id):
            logger.info(f"Campaign {campaign_id} unmarked for car {car_id}")
        return self.repo.reload(car)

    def clear_completed_campaigns(self, car_id: UUID) -> CarModel:
        car = self.get_car(car_id)
        car.completed_service_campaigns = []
        return self.repo.save(car)

    def _check_references(self, brand_id: UUID | None, model_id: UUID | None) -> None:
        if brand_id and not self.brand_repo.get(brand_id):
            raise ValueError("Brand not found")

        if model_id:
            car_model = self.car_model_repo.get(model_id)
            if not car_model:
                raise ValueError("Car model not found")
            if brand_id and car_model.brand_id != brand_id:
                raise ValueError("Car model does not belong to this brand")


def _unique(items):
    seen = []
    for item in items:
        if item not in seen:
            seen.append(item)
    return seen
