# storefront/services/notification_service.py
from storefront.celery_worker import celery_app
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class NotificationService:
    """
    Sends user notifications.
    Work is handed to Celery and processed asynchronously.
    """

    @staticmethod
    def send_welcome_notification(user_id: int, email: str):
        """
        Announces a freshly registered account.
        """
        send_welcome_notification_task.delay(user_id, email)


@celery_app.task(name="storefront.services.notification_service.send_welcome_notification_task")
def send_welcome_notification_task(user_id: int, email: str):
    """
    Celery task - a real deployment would send an email here.
    For now it only logs.
    """
    logger.info(f"[NOTIFICATION] Welcome user {user_id} <{email}>")

    return {"user_id": user_id, "email": email, "status": "sent"}
