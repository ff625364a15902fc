"""Logging setup: one stdout handler, plain text or JSON lines."""
import json
import logging
import sys

# Extras passed by the engine via ``logger.*(..., extra={...})``.
_EXTRA_FIELDS = ("error_code", "grand_total")


class JSONFormatter(logging.Formatter):
    def format(self, record):
        entry = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for name in _EXTRA_FIELDS:
            if hasattr(record, name):
                entry[name] = str(getattr(record, name))
        return json.dumps(entry)


def setup_logging(level: str = "INFO", json_output: bool = False) -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = logging.StreamHandler(sys.stdout)
    if json_output:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s [%(name)s] %(levelname)s: %(message)s"))
    root.handlers = [handler]
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
