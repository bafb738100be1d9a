# -*- coding: utf-8 -*-
"""
logging_.py - Structured JSON logging for Reply Clipboard
"""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

LOGGER_NAME = "replyclipboard"


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
            "module": record.module,
            "line": record.lineno,
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def setup_json_logging(level: str = "INFO", log_file: Optional[Path] = None) -> logging.Logger:
    """Attach JSON handlers to the package logger once."""
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(JsonFormatter())
        logger.addHandler(handler)
        if log_file is not None:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.setFormatter(JsonFormatter())
            logger.addHandler(file_handler)
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    return logger
