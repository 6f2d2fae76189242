"""
kontrol_core.logger
-------------------
JSON-line logging for kontrol components. One object per line on stdout
(and optionally a file), UTC timestamps.
"""

import logging, json, sys, time, os

DEFAULT_LEVEL = logging.INFO


class JsonFormatter(logging.Formatter):
    converter = time.gmtime

    def __init__(self):
        super().__init__(datefmt="%Y-%m-%dT%H:%M:%SZ")

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "ts": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "name": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            entry["exc"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)


def _resolve_level(level):
    if level is None:
        level = os.getenv("KONTROL_LOG_LEVEL", "INFO")
    if isinstance(level, int):
        return level
    # unknown names fall back to INFO
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else DEFAULT_LEVEL


def get_logger(name="kontrol", level=None, to_file=None):
    """Structured logger shared by all kontrol modules."""
    logger = logging.getLogger(name)
    logger.setLevel(_resolve_level(level))

    if not logger.handlers:
        formatter = JsonFormatter()
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

        if to_file:
            os.makedirs(os.path.dirname(to_file) or ".", exist_ok=True)
            file_handler = logging.FileHandler(to_file)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger
