# autodealer/utils/retry.py
from sqlalchemy.exc import OperationalError
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type

from autodealer.utils.settings import DB_CONNECT_RETRIES


def db_retry():
    return retry(
        reraise=True,
        stop=stop_after_attempt(DB_CONNECT_RETRIES),
        wait=wait_exponential(multiplier=0.5, min=0.5, max=5),
        retry=retry_if_exception_type(OperationalError),
    )
