# autodealer/services/notification_service.py
from uuid import UUID

from kombu.exceptions import OperationalError as BrokerError

from autodealer.celery_worker import celery_app
from autodealer.utils.logging import get_logger

logger = get_logger(__name__)


class NotificationService:
    """
    Customer notifications about their purchase requests.
    Sent through Celery so the request does not wait for delivery.
    """

    @staticmethod
    def send_purchase_notification(customer_id: UUID, request_id: UUID, status: str) -> bool:
        """
        Called after the purchase request is committed, a broker outage
        must not turn a stored change into an error response.
        """
        try:
            send_purchase_notification_task.delay(str(customer_id), str(request_id), status)
        except BrokerError as e:
            logger.warning(f"Notification for purchase request {request_id} not queued: {e}")
            return False
        return True


@celery_app.task(name="autodealer.services.notification_service.send_purchase_notification_task")
def send_purchase_notification_task(customer_id: str, request_id: str, status: str):
    """
    Only logs for now, delivery channel (email/SMS) is not wired yet.
    """
    logger.info(f"[NOTIFICATION] Customer {customer_id}: purchase request {request_id} is {status}")

    return {"customer_id": customer_id, "request_id": request_id, "status": status}
