import logging

import uvicorn

from .api.main import create_app
from .config import PERSISTENCE_KEYS, load_config, require_config
from .logging_config.logging_config import setup_logging


# ruff: noqa: D103
def main() -> None:
    config = load_config()
    setup_logging(config["APP_NAME"], config["LOG_DIR"])
    logger = logging.getLogger(__name__)
    logger.info("Starting Weekly Report API")

    # persistence is optional, but a partial setup is a mistake
    if any(config.get(key) for key in PERSISTENCE_KEYS):
        require_config(config, PERSISTENCE_KEYS)
    else:
        logger.info("Google persistence is not configured; reports will not be archived")

    app = create_app(config)
    uvicorn.run(app, host=config["HOST"], port=config["PORT"])


if __name__ == "__main__":
    main()
