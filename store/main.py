# store/main.py
import uvicorn

from store.api import create_app
from store.utils.settings import HOST, PORT
from store.utils.logging import get_logger

logger = get_logger(__name__)

app = create_app()


def run():
    logger.info(f"Starting online store on http://{HOST}:{PORT}")
    uvicorn.run(app, host=HOST, port=PORT)


if __name__ == "__main__":
    run()
