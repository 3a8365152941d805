import json
import logging
import sys
from datetime import datetime, timezone

from .config import Settings, settings as default_settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

# Per-statement and per-request loggers, quiet unless DEBUG
NOISY_LOGGERS = ("sqlalchemy.engine", "uvicorn.access")

class ServiceJsonFormatter(logging.Formatter):
    """JSON lines tagged with the service name and version"""

    def __init__(self, service: str, version: str):
        super().__init__()
        self.service = service
        self.version = version

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "service": self.service,
            "version": self.version,
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry)

def setup_logging(config: Settings = None) -> logging.Handler:
    """Point the root logger at stdout using LOG_LEVEL / LOG_FORMAT / DEBUG"""
    config = config or default_settings
    level = logging.getLevelName(config.LOG_LEVEL.upper())
    if not isinstance(level, int):
        level = logging.INFO

    handler = logging.StreamHandler(sys.stdout)
    if config.LOG_FORMAT == "json":
        handler.setFormatter(ServiceJsonFormatter(config.APP_NAME, config.APP_VERSION))
    else:
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(level if config.DEBUG else max(level, logging.WARNING))
    return handler
