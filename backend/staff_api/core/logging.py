import logging
from contextvars import ContextVar

request_id_var: ContextVar[str] = ContextVar("request_id", default="-")


class RequestIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get()
        return True


def configure_logging(level: str = "INFO") -> None:
    """Install a single stream handler on the package logger.

    Every record carries the id of the request it was emitted under,
    or "-" outside of a request.
    """
    logger = logging.getLogger("staff_api")
    logger.setLevel(level.upper())

    if any(getattr(h, "_staff_api", False) for h in logger.handlers):
        return

    handler = logging.StreamHandler()
    handler._staff_api = True
    handler.addFilter(RequestIdFilter())
    handler.setFormatter(logging.Formatter(
        "%(asctime)s %(levelname)s [%(request_id)s] %(name)s: %(message)s"
    ))
    logger.addHandler(handler)
