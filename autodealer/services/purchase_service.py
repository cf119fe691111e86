# autodealer/services/purchase_service.py
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from autodealer.data.models.purchase_request import PurchaseRequestModel
from autodealer.domain.enums import RequestStatus
from autodealer.domain.schemas import PurchaseRequestCreate
from autodealer.repos.car_repo import CarRepo
from autodealer.repos.customer_repo import CustomerRepo
from autodealer.repos.purchase_repo import PurchaseRepo
from autodealer.services.notification_service import NotificationService
from autodealer.utils.logging import get_logger

logger = get_logger(__name__)

DUPLICATE_MSG = "Pending purchase request already exists for this car and customer"


class PurchaseService:
    """
    Purchase requests of customers for cars.
    A customer can hold only one Pending request per car, the partial unique
    index on purchase_requests guarantees it even under concurrent inserts.
    """

    def __init__(self, db: Session, notification_service: NotificationService | None = None):
        self.repo = PurchaseRepo(db)
        self.car_repo = CarRepo(db)
        self.customer_repo = CustomerRepo(db)
        self.notification_service = notification_service or NotificationService()

    #query
    def list_requests(self, skip: int = 0, limit: int = 100):
        return self.repo.list_requests(skip=skip, limit=limit)

    def get_request(self, request_id: UUID) -> PurchaseRequestModel:
        request = self.repo.get(request_id)
        if not request:
            raise LookupError("Purchase request not found")
        return request

    def list_by_customer(self, customer_id: UUID):
        return self.repo.list_by_customer(customer_id)

    def list_by_car(self, car_id: UUID):
        return self.repo.list_by_car(car_id)

    def list_by_status(self, status: RequestStatus):
        return self.repo.list_by_status(RequestStatus(status).value)

    #commands
    def create_request(self, payload: PurchaseRequestCreate) -> PurchaseRequestModel:
        if not self.car_repo.get(payload.car_id):
            raise ValueError("Car not found")

        if not self.customer_repo.get(payload.customer_id):
            raise ValueError("Customer not found")

        if self.repo.get_pending(payload.car_id, payload.customer_id):
            raise ValueError(DUPLICATE_MSG)

        request = PurchaseRequestModel(
            **payload.model_dump(),
            status=RequestStatus.PENDING.value,
        )

        try:
            created = self.repo.add(request)
        except IntegrityError as e:
            #lost the race against another insert for the same pair
            self.repo.rollback()
            logger.warning(f"Purchase request insert rejected: {e.orig}")
            raise ValueError(DUPLICATE_MSG) from e

        logger.info(
            f"Created purchase request {created.id} "
            f"(car {created.car_id}, customer {created.customer_id})"
        )
        self.notification_service.send_purchase_notification(
            created.customer_id, created.id, created.status
        )
        return created

    def update_status(self, request_id: UUID, status: RequestStatus) -> PurchaseRequestModel:
        request = self.get_request(request_id)
        new_status = RequestStatus(status).value

        if new_status == request.status:
            return request

        old_status = request.status
        request.status = new_status

        try:
            updated = self.repo.save(request)
        except IntegrityError as e:
            #going back to Pending while another Pending request exists
            self.repo.rollback()
            raise ValueError(DUPLICATE_MSG) from e

        logger.info(f"Purchase request {request_id} status {old_status} -> {new_status}")
        self.notification_service.send_purchase_notification(
            updated.customer_id, updated.id, updated.status
        )
        return updated

    def delete_request(self, request_id: UUID) -> None:
        request = self.get_request(request_id)
        self.repo.delete(request)
        logger.info(f"Deleted purchase request {request_id}")
