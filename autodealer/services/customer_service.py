# autodealer/services/customer_service.py
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from autodealer.data.models.customer import CustomerModel
from autodealer.domain.schemas import CustomerCreate, CustomerUpdate
from autodealer.repos.customer_repo import CustomerRepo
from autodealer.utils.logging import get_logger

logger = get_logger(__name__)


class CustomerService:
    def __init__(self, db: Session):
        self.repo = CustomerRepo(db)

    def list_customers(self, skip: int = 0, limit: int = 100):
        return self.repo.list_customers(skip=skip, limit=limit)

    def get_customer(self, customer_id: UUID) -> CustomerModel:
        customer = self.repo.get(customer_id)
        if not customer:
            raise LookupError("Customer not found")
        return customer

    def create_customer(self, payload: CustomerCreate) -> CustomerModel:
        if self.repo.get_by_email(payload.email):
            raise ValueError("Email already exists")

        try:
            created = self.repo.add(CustomerModel(**payload.model_dump()))
        except IntegrityError as e:
            self.repo.rollback()
            raise ValueError("Email already exists") from e

        logger.info(f"Created customer {created.id}")
        return created

    def update_customer(self, customer_id: UUID, payload: CustomerUpdate) -> CustomerModel:
        customer = self.get_customer(customer_id)
        data = payload.model_dump(exclude_unset=True, exclude_none=True)

        new_email = data.get("email")
        if new_email and new_email != customer.email and self.repo.get_by_email(new_email):
            raise ValueError("Email already exists")

        for field, value in data.items():
            setattr(customer, field, value)

        try:
            return self.repo.save(customer)
        except IntegrityError as e:
            self.repo.rollback()
            raise ValueError("Email already exists") from e

    def delete_customer(self, customer_id: UUID) -> None:
        customer = self.get_customer(customer_id)
        self.repo.delete(customer)
        logger.info(f"Deleted customer {customer_id} with its purchase requests")
