import logging

import uvicorn

from garden.api.api_run import app
from garden.utilities.config import APP_HOST, APP_PORT, DEBUG, LOG_LEVEL


def run():
    logging.basicConfig(
        level=logging.DEBUG if DEBUG else LOG_LEVEL,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    # Print a friendly message that points to the API root
    print(f"Garden Planner API on http://localhost:{APP_PORT}/api (Press CTRL+C to quit)")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT)


if __name__ == "__main__":
    run()
