# autodealer/api/routers/health.py
from fastapi import APIRouter
from sqlalchemy.exc import OperationalError

from autodealer.data.database import ping_db
from autodealer.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check():
    try:
        ping_db()
        database = "ok"
    except OperationalError as e:
        logger.error(f"Database ping failed: {e}")
        database = "unavailable"

    return {
        "status": "ok" if database == "ok" else "degraded",
        "message": "AutoDealer API is running",
        "database": database,
    }
