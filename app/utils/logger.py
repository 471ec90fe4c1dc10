import logging
import json
import sys


class JsonFormatter(logging.Formatter):
    def format(self, record):
        log_obj = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "line": record.lineno
        }
        # extra={"props": {...}} is merged into the line
        if hasattr(record, "props"):
            log_obj.update(record.props)

        if record.exc_info:
            log_obj["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(log_obj, default=str)


PLAIN_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def build_handler(json_output: bool = True) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    if json_output:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(PLAIN_FORMAT))
    return handler
