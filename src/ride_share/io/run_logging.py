# ride_share/io/run_logging.py
import json
import logging
import sys


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def default_json_logger(name="ride_share", level="INFO", stream=None):
    """
    JSON lines on stderr, so report output on stdout is left untouched.
    Child loggers (ride_share.domain...) propagate here.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(stream or sys.stderr)
        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
    logger.setLevel(level)
    return logger


class RunLogging:
    """Structured lifecycle logs for one demo run."""

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        logger: logging.Logger | None = None,
    ):
        self.run_id = run_id
        self.log = logger or default_json_logger(level=level)

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    def run_start(self, *, scenario: str, rides: int, drivers: int, riders: int):
        self._emit("INFO", "run_start", scenario=scenario, rides=rides, drivers=drivers, riders=riders)

    def run_end(self, *, revenue: float, **extra):
        self._emit("INFO", "run_end", revenue=round(revenue, 2), **extra)

    def error(self, *, exc: BaseException, **extra):
        self._emit("ERROR", "run_error", error=str(exc), error_type=type(exc).__name__, **extra)


class NoopLogging:
    def run_start(self, **_):
        pass

    def run_end(self, **_):
        pass
