# autodealer/repos/car_repo.py
from typing import List
from uuid import UUID

from sqlalchemy import any_, cast, func, literal, not_, select, update
from sqlalchemy.dialects.postgresql import ARRAY, UUID as PG_UUID

from autodealer.data.models.car import CarModel
from autodealer.repos.base_repo import BaseRepo


class CarRepo(BaseRepo):
    model = CarModel

    def list_cars(self, skip: int = 0, limit: int = 100) -> List[CarModel]:
        return self.db.execute(
            select(CarModel)
            .order_by(CarModel.created_at.desc())
            .offset(skip)
            .limit(limit)
        ).scalars().all()

    def list_by_status(self, status: str) -> List[CarModel]:
        return self.db.execute(
            select(CarModel)
            .where(CarModel.status == status)
            .order_by(CarModel.created_at.desc())
        ).scalars().all()

    def list_by_brand(self, brand_id: UUID) -> List[CarModel]:
        return self.db.execute(
            select(CarModel)
            .where(CarModel.brand_id == brand_id)
            .order_by(CarModel.created_at.desc())
        ).scalars().all()

    def list_by_model(self, model_id: UUID) -> List[CarModel]:
        return self.db.execute(
            select(CarModel)
            .where(CarModel.model_id == model_id)
            .order_by(CarModel.created_at.desc())
        ).scalars().all()

    def get_by_vin(self, vin: str) -> CarModel | None:
        return self.db.execute(
            select(CarModel).where(CarModel.vin == vin)
        ).scalar_one_or_none()

    def list_by_completed_campaign(self, campaign_id: UUID) -> List[CarModel]:
        #@> containment, served by the GIN index
        return self.db.execute(
            select(CarModel)
            .where(CarModel.completed_service_campaigns.contains(
                cast([campaign_id], ARRAY(PG_UUID(as_uuid=True)))
            ))
            .order_by(CarModel.created_at.desc())
        ).scalars().all()

    #single UPDATE per change, concurrent writers never overwrite each other's array
    def append_completed_campaign(self, car_id: UUID, campaign_id: UUID) -> bool:
        campaign = literal(campaign_id, PG_UUID(as_uuid=True))
        result = self.db.execute(
            update(CarModel)
            .where(
                CarModel.id == car_id,
                not_(campaign == any_(CarModel.completed_service_campaigns)),
            )
            .values(
                completed_service_campaigns=func.array_append(
                    CarModel.completed_service_campaigns, campaign
                ),
                updated_at=func.now(),
            )
            .execution_options(synchronize_session=False)
        )
        self.db.commit()
        return result.rowcount > 0

    def remove_completed_campaign(self, car_id: UUID, campaign_id: UUID) -> bool:
        campaign = literal(campaign_id, PG_UUID(as_uuid=True))
        result = self.db.execute(
            update(CarModel)
            .where(
                CarModel.id == car_id,
                campaign == any_(CarModel.completed_service_campaigns),
            )
            .values(
                completed_service_campaigns=func.array_remove(
                    CarModel.completed_service_campaigns, campaign
                ),
                updated_at=func.now(),
            )
            .execution_options(synchronize_session=False)
        )
        self.db.commit()
        return result.rowcount > 0
