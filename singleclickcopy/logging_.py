import json
import logging
from datetime import datetime, timezone


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
            "module": record.module,
            "line": record.lineno,
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def setup_logging(config=None, logger_name: str = "singleclickcopy") -> logging.Logger:
    """Attach JSON stream logging and, if configured, a log file.

    Does nothing when the logger already has handlers.
    """
    logger = logging.getLogger(logger_name)
    if logger.handlers:
        return logger
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    logger.addHandler(handler)
    level = getattr(logging, (config.log_level if config else "INFO").upper(), logging.INFO)
    logger.setLevel(level)
    if config is not None and config.log_to_file:
        try:
            config.app_data_path.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(config.log_file, mode="a", encoding="utf-8")
        except OSError as e:
            logger.warning(f"Log file unavailable, logging to stream only: {e}")
        else:
            file_handler.setFormatter(JsonFormatter())
            logger.addHandler(file_handler)
    return logger
