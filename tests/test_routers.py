# tests/test_routers.py
import uuid
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from autodealer.api.routers import brands, cars, customers, parts, purchases
from autodealer.api.routers import health


@pytest.fixture
def stub_service(monkeypatch):
    """Replaces get_service of a router module with a MagicMock."""

    def _stub(module):
        svc = MagicMock()
        monkeypatch.setattr(module, "get_service", lambda db: svc)
        return svc

    return _stub


def test_root(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.json() == {"message": "AutoDealer API is working!"}


def test_health_ok(client, monkeypatch):
    monkeypatch.setattr(health, "ping_db", lambda: True)

    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_health_degraded_without_database(client, monkeypatch):
    def _down():
        raise OperationalError("SELECT 1", {}, Exception("connection refused"))

    monkeypatch.setattr(health, "ping_db", _down)

    body = client.get("/health").json()
    assert body["status"] == "degraded"
    assert body["database"] == "unavailable"


# =====================================================
# CARS
# =====================================================
def test_list_cars(client, stub_service, make_car):
    svc = stub_service(cars)
    svc.list_cars.return_value = [make_car(), make_car(vin=None)]

    resp = client.get("/api/cars/", params={"skip": 0, "limit": 10})

    assert resp.status_code == 200
    assert len(resp.json()) == 2
    svc.list_cars.assert_called_once_with(skip=0, limit=10)


def test_create_car(client, stub_service, make_car):
    svc = stub_service(cars)
    svc.create_car.return_value = make_car()

    resp = client.post(
        "/api/cars/",
        json={
            "brand": "Toyota",
            "model": "Camry",
            "year": 2020,
            "price": 25000,
            "mileage": 30000,
            "color": "Black",
            "fuel_type": "Petrol",
            "transmission": "Automatic",
        },
    )

    assert resp.status_code == 201
    assert resp.json()["status"] == "Available"
    assert resp.json()["completed_service_campaigns"] == []


def test_create_car_year_out_of_range_is_422(client, stub_service):
    svc = stub_service(cars)

    resp = client.post(
        "/api/cars/",
        json={
            "brand": "Lada",
            "model": "2107",
            "year": 1985,
            "price": 1000,
            "mileage": 200000,
            "color": "White",
            "fuel_type": "Petrol",
            "transmission": "Manual",
        },
    )

    assert resp.status_code == 422
    svc.create_car.assert_not_called()


def test_get_missing_car_is_404(client, stub_service):
    svc = stub_service(cars)
    svc.get_car.side_effect = LookupError("Car not found")

    resp = client.get(f"/api/cars/{uuid.uuid4()}")

    assert resp.status_code == 404
    assert resp.json()["detail"] == "Car not found"


def test_cars_by_status(client, stub_service, make_car):
    svc = stub_service(cars)
    svc.list_by_status.return_value = [make_car(status="Sold")]

    resp = client.get("/api/cars/status/Sold")

    assert resp.status_code == 200
    assert resp.json()[0]["status"] == "Sold"


def test_cars_by_unknown_status_is_422(client, stub_service):
    stub_service(cars)
    assert client.get("/api/cars/status/Flying").status_code == 422


def test_patch_car_status_takes_bare_string(client, stub_service, make_car):
    svc = stub_service(cars)
    car = make_car(status="Reserved")
    svc.update_status.return_value = car

    resp = client.patch(f"/api/cars/{car.id}/status", json="Reserved")

    assert resp.status_code == 200
    assert resp.json()["status"] == "Reserved"
    assert svc.update_status.call_args.args[1] == "Reserved"


def test_car_by_vin(client, stub_service, make_car):
    svc = stub_service(cars)
    svc.get_by_vin.return_value = make_car()

    resp = client.get("/api/cars/vin/JTDBE32K123456789")

    assert resp.status_code == 200
    svc.get_by_vin.assert_called_once_with("JTDBE32K123456789")


def test_mark_campaign_completed(client, stub_service, make_car):
    svc = stub_service(cars)
    campaign = uuid.uuid4()
    car = make_car(completed_service_campaigns=[campaign])
    svc.add_completed_campaign.return_value = car

    resp = client.post(f"/api/cars/{car.id}/campaigns/{campaign}")

    assert resp.status_code == 200
    assert resp.json()["completed_service_campaigns"] == [str(campaign)]


def test_cars_by_completed_campaign(client, stub_service, make_car):
    svc = stub_service(cars)
    campaign = uuid.uuid4()
    svc.list_by_completed_campaign.return_value = [make_car(completed_service_campaigns=[campaign])]

    resp = client.get(f"/api/cars/campaign/{campaign}")

    assert resp.status_code == 200
    svc.list_by_completed_campaign.assert_called_once_with(campaign)


def test_delete_car(client, stub_service):
    stub_service(cars)
    assert client.delete(f"/api/cars/{uuid.uuid4()}").status_code == 204


# =====================================================
# PURCHASES
# =====================================================
def test_create_purchase(client, stub_service, make_purchase):
    svc = stub_service(purchases)
    request = make_purchase()
    svc.create_request.return_value = request

    resp = client.post(
        "/api/purchases/",
        json={"car_id": str(request.car_id), "customer_id": str(request.customer_id), "offer_price": 24000},
    )

    assert resp.status_code == 201
    assert resp.json()["status"] == "Pending"


def test_duplicate_pending_purchase_is_400(client, stub_service):
    svc = stub_service(purchases)
    svc.create_request.side_effect = ValueError(
        "Pending purchase request already exists for this car and customer"
    )

    resp = client.post(
        "/api/purchases/",
        json={"car_id": str(uuid.uuid4()), "customer_id": str(uuid.uuid4())},
    )

    assert resp.status_code == 400


def test_patch_purchase_status(client, stub_service, make_purchase):
    svc = stub_service(purchases)
    request = make_purchase(status="Approved")
    svc.update_status.return_value = request

    resp = client.patch(f"/api/purchases/{request.id}/status", json="Approved")

    assert resp.status_code == 200
    assert resp.json()["status"] == "Approved"


def test_purchase_invalid_status_is_422(client, stub_service):
    stub_service(purchases)
    resp = client.patch(f"/api/purchases/{uuid.uuid4()}/status", json="Cancelled")
    assert resp.status_code == 422


def test_purchases_by_customer(client, stub_service, make_purchase):
    svc = stub_service(purchases)
    customer_id = uuid.uuid4()
    svc.list_by_customer.return_value = [make_purchase(customer_id=customer_id)]

    resp = client.get(f"/api/purchases/customer/{customer_id}")

    assert resp.status_code == 200
    assert resp.json()[0]["customer_id"] == str(customer_id)


# =====================================================
# CUSTOMERS, BRANDS, PARTS
# =====================================================
def test_create_customer_duplicate_email_is_400(client, stub_service):
    svc = stub_service(customers)
    svc.create_customer.side_effect = ValueError("Email already exists")

    resp = client.post(
        "/api/customers/",
        json={"first_name": "Anna", "last_name": "Smirnova", "email": "anna@gmail.com", "phone": "+7 900"},
    )

    assert resp.status_code == 400
    assert resp.json()["detail"] == "Email already exists"


def test_brand_by_country(client, stub_service, now):
    svc = stub_service(brands)
    svc.list_by_country.return_value = [
        SimpleNamespace(id=uuid.uuid4(), name="Toyota", country="Japan", created_at=now, updated_at=now)
    ]

    resp = client.get("/api/brands/country/japan")

    assert resp.status_code == 200
    assert resp.json()[0]["name"] == "Toyota"
    svc.list_by_country.assert_called_once_with("japan")


def test_parts_by_vin(client, stub_service, now):
    svc = stub_service(parts)
    vin = "JTDBE32K123456789"
    svc.list_by_vin.return_value = [
        SimpleNamespace(
            id=uuid.uuid4(),
            article="OF-1",
            name="Oil filter",
            model="Camry",
            purchase_price=4.5,
            sale_price=9.0,
            compatible_vins=[vin],
            brand_id=None,
            car_model_id=None,
            created_at=now,
            updated_at=now,
        )
    ]

    resp = client.get(f"/api/parts/vin/{vin}")

    assert resp.status_code == 200
    assert resp.json()[0]["compatible_vins"] == [vin]
