# tests/test_notifications.py
import uuid
from unittest.mock import MagicMock

from kombu.exceptions import OperationalError as BrokerError

from autodealer.celery_worker import celery_app
from autodealer.domain.enums import RequestStatus
from autodealer.services import notification_service
from autodealer.services.notification_service import (
    NotificationService,
    send_purchase_notification_task,
)
from autodealer.services.purchase_service import PurchaseService


def test_task_registered():
    assert send_purchase_notification_task.name in celery_app.tasks


def test_task_runs_eagerly_in_tests():
    customer_id, request_id = str(uuid.uuid4()), str(uuid.uuid4())

    result = send_purchase_notification_task.delay(customer_id, request_id, "Approved")

    assert result.get() == {"customer_id": customer_id, "request_id": request_id, "status": "Approved"}


def test_service_enqueues_with_string_ids(monkeypatch):
    calls = []
    monkeypatch.setattr(
        notification_service.send_purchase_notification_task,
        "delay",
        lambda *args: calls.append(args),
    )
    customer_id, request_id = uuid.uuid4(), uuid.uuid4()

    NotificationService.send_purchase_notification(customer_id, request_id, "Pending")

    assert calls == [(str(customer_id), str(request_id), "Pending")]


def test_broker_outage_is_logged_not_raised(monkeypatch):
    def _broker_down(*args):
        raise BrokerError("Error 111 connecting to redis:6379. Connection refused.")

    monkeypatch.setattr(notification_service.send_purchase_notification_task, "delay", _broker_down)

    assert NotificationService.send_purchase_notification(uuid.uuid4(), uuid.uuid4(), "Approved") is False


def test_purchase_saved_even_when_broker_is_down(monkeypatch, make_purchase):
    def _broker_down(*args):
        raise BrokerError("Connection refused")

    monkeypatch.setattr(notification_service.send_purchase_notification_task, "delay", _broker_down)

    request = make_purchase()
    svc = PurchaseService(MagicMock())
    svc.repo = MagicMock()
    svc.repo.get.return_value = request
    svc.repo.save.side_effect = lambda entity: entity

    updated = svc.update_status(request.id, RequestStatus.APPROVED)

    assert updated.status == "Approved"
    svc.repo.save.assert_called_once_with(request)
