# tests/test_models.py
from sqlalchemy.dialects import postgresql
from sqlalchemy.schema import CreateIndex, CreateTable

from autodealer.data.database import Base
from autodealer.data.models import (
    BrandModel,
    CarModelModel,
    CarModel,
    CustomerModel,
    PartModel,
    PurchaseRequestModel,
)


def ddl(model) -> str:
    return str(CreateTable(model.__table__).compile(dialect=postgresql.dialect()))


def index_ddl(model, name: str) -> str:
    index = next(i for i in model.__table__.indexes if i.name == name)
    return str(CreateIndex(index).compile(dialect=postgresql.dialect()))


def test_all_tables_registered():
    assert set(Base.metadata.tables) == {
        "brands",
        "car_models",
        "cars",
        "customers",
        "purchase_requests",
        "parts",
    }


def test_cars_checks():
    sql = ddl(CarModel)
    assert "CHECK (year >= 1990 AND year <= 2024)" in sql
    assert "CHECK (price >= 0)" in sql
    assert "CHECK (mileage >= 0)" in sql
    assert "fuel_type IN ('Petrol', 'Diesel', 'Electric', 'Hybrid')" in sql
    assert "transmission IN ('Manual', 'Automatic', 'CVT')" in sql
    assert "status IN ('Available', 'Reserved', 'Sold', 'Maintenance')" in sql


def test_cars_defaults():
    sql = ddl(CarModel)
    assert "status VARCHAR(20) DEFAULT 'Available' NOT NULL" in sql
    assert "completed_service_campaigns UUID[] DEFAULT '{}' NOT NULL" in sql
    assert "DEFAULT gen_random_uuid()" in sql


def test_cars_reference_brands_and_models():
    sql = ddl(CarModel)
    assert "FOREIGN KEY(brand_id) REFERENCES brands (id)" in sql
    assert "FOREIGN KEY(model_id) REFERENCES car_models (id)" in sql


def test_cars_campaigns_gin_index():
    sql = index_ddl(CarModel, "idx_cars_completed_campaigns")
    assert "USING gin (completed_service_campaigns)" in sql


def test_cars_created_at_desc_index():
    assert "created_at DESC" in index_ddl(CarModel, "idx_cars_created_at")


def test_customer_email_unique():
    assert "UNIQUE (email)" in ddl(CustomerModel)


def test_purchase_requests_cascade_from_car_and_customer():
    sql = ddl(PurchaseRequestModel)
    assert "FOREIGN KEY(car_id) REFERENCES cars (id) ON DELETE CASCADE" in sql
    assert "FOREIGN KEY(customer_id) REFERENCES customers (id) ON DELETE CASCADE" in sql
    assert "status IN ('Pending', 'Approved', 'Rejected', 'Completed')" in sql
    assert "CHECK (offer_price >= 0)" in sql
    assert "status VARCHAR(20) DEFAULT 'Pending' NOT NULL" in sql


def test_one_pending_request_per_car_and_customer():
    sql = index_ddl(PurchaseRequestModel, "idx_purchase_requests_car_customer_pending")
    assert sql.startswith("CREATE UNIQUE INDEX")
    assert "(car_id, customer_id)" in sql
    assert "WHERE status = 'Pending'" in sql


def test_parts_constraints_and_vins_index():
    sql = ddl(PartModel)
    assert "CHECK (purchase_price >= 0)" in sql
    assert "CHECK (sale_price >= 0)" in sql
    assert "UNIQUE (article)" in sql
    assert "compatible_vins TEXT[] DEFAULT '{}' NOT NULL" in sql
    assert "USING gin (compatible_vins)" in index_ddl(PartModel, "idx_parts_compatible_vins")


def test_brand_name_unique():
    assert "UNIQUE (name)" in ddl(BrandModel)


def test_car_models_cascade_from_brand_and_unique_per_brand():
    sql = ddl(CarModelModel)
    assert "FOREIGN KEY(brand_id) REFERENCES brands (id) ON DELETE CASCADE" in sql
    assert "UNIQUE (brand_id, name)" in sql


def test_models_do_not_import_request_schemas():
    import inspect

    from autodealer.data.models import brand, car, car_model, customer, part, purchase_request

    for module in (brand, car, car_model, customer, part, purchase_request):
        assert "domain.schemas" not in inspect.getsource(module), module.__name__
