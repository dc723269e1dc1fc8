#!/usr/bin/env python3
"""
Entry point for the Qanyare restaurant API
"""

import logging

import uvicorn
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from qanyare.infrastructure.configuration.config import get_config
from qanyare.infrastructure.logging.logging_config import setup_logging
from qanyare.presentation.api.app import create_app


def main() -> None:
    """Configure logging and serve the API"""
    config = get_config()
    setup_logging(config)
    logger = logging.getLogger(__name__)

    app = create_app(config)
    logger.info(
        "Starting FastAPI server",
        extra={"host": config.host, "port": config.port, "environment": config.environment},
    )
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())


if __name__ == "__main__":
    main()
