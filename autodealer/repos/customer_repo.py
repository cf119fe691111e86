# autodealer/repos/customer_repo.py
from typing import List

from sqlalchemy import select

from autodealer.data.models.customer import CustomerModel
from autodealer.repos.base_repo import BaseRepo


class CustomerRepo(BaseRepo):
    model = CustomerModel

    def list_customers(self, skip: int = 0, limit: int = 100) -> List[CustomerModel]:
        return self.db.execute(
            select(CustomerModel)
            .order_by(CustomerModel.created_at.desc())
            .offset(skip)
            .limit(limit)
        ).scalars().all()

    def get_by_email(self, email: str) -> CustomerModel | None:
        return self.db.execute(
            select(CustomerModel).where(CustomerModel.email == email)
        ).scalar_one_or_none()
