import json
import logging
from datetime import datetime

from agroconnect.core.config import settings

_EXTRA_FIELDS = ("request_id", "user_id", "method", "path", "status_code", "duration_ms")


class JSONFormatter(logging.Formatter):
    def format(self, record):
        log = {
            "timestamp": datetime.utcnow().isoformat() + "Z",
            "level": record.levelname,
            "service": "agroconnect",
            "logger": record.name,
            "message": record.getMessage(),
        }
        for field in _EXTRA_FIELDS:
            if hasattr(record, field):
                log[field] = getattr(record, field)
        if record.exc_info:
            log["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(log, default=str)


logger = logging.getLogger("agroconnect")
logger.setLevel(settings.LOG_LEVEL.upper())

if not logger.handlers:
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(JSONFormatter())
    logger.addHandler(console_handler)
