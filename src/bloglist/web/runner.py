"""Uvicorn server runner."""

import copy
from typing import Any

import structlog
import uvicorn
from uvicorn.config import LOGGING_CONFIG

from bloglist.app import App
from bloglist.config import Config
from bloglist.web.server import create_fastapi_app

logger = structlog.get_logger(__name__)

ACCESS_LOG_FORMAT = '%(asctime)s - %(client_addr)s - "%(request_line)s" %(status_code)s'
DEFAULT_LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def build_log_config(debug: bool) -> dict[str, Any]:
    """Uvicorn logging config with compact lines, verbose in debug mode."""
    log_config = copy.deepcopy(LOGGING_CONFIG)  # uvicorn's dict is module-global
    log_config["formatters"]["access"]["fmt"] = ACCESS_LOG_FORMAT
    log_config["formatters"]["default"]["fmt"] = DEFAULT_LOG_FORMAT
    log_config["loggers"]["uvicorn"]["level"] = "DEBUG" if debug else "INFO"
    return log_config


def run_server(app: App, config: Config) -> None:
    fastapi_app = create_fastapi_app(app, config)
    logger.info("server_starting", host=config.host, port=config.port, debug=config.debug)
    uvicorn.run(
        fastapi_app,
        host=config.host,
        port=config.port,
        log_config=build_log_config(config.debug),
        access_log=True,
    )
