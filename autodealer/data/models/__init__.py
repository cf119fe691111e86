#import of all models so SQLAlchemy registers them in Base.metadata

from autodealer.data.models.brand import BrandModel
from autodealer.data.models.car_model import CarModelModel
from autodealer.data.models.car import CarModel
from autodealer.data.models.customer import CustomerModel
from autodealer.data.models.purchase_request import PurchaseRequestModel
from autodealer.data.models.part import PartModel

__all__ = [
    "BrandModel",
    "CarModelModel",
    "CarModel",
    "CustomerModel",
    "PurchaseRequestModel",
    "PartModel",
]
