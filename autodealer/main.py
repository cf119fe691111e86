# autodealer/main.py
import uvicorn

from autodealer.api import create_app
from autodealer.utils.settings import SERVER_HOST, SERVER_PORT
from autodealer.utils.logging import get_logger

logger = get_logger(__name__)

app = create_app()


def run():
    logger.info(f"Starting AutoDealer API on http://{SERVER_HOST}:{SERVER_PORT}")
    uvicorn.run(app, host=SERVER_HOST, port=SERVER_PORT)


if __name__ == "__main__":
    run()
