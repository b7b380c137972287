import logging
import re

from pythonjsonlogger.json import JsonFormatter

from .config import Settings


class ContactRedactingFilter(logging.Filter):
    _phone_re = re.compile(r"\(\d{3}\)\s?\d{3}-\d{4}")

    def filter(self, record: logging.LogRecord) -> bool:
        try:
            msg = record.getMessage()
        except Exception:
            return True
        record.msg = self._phone_re.sub("[REDACTED_PHONE]", msg)
        record.args = ()
        return True


def configure_logging(settings: Settings) -> None:
    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    handler = logging.StreamHandler()

    if settings.LOG_JSON:
        formatter = JsonFormatter(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s"
        )
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s"
        )

    handler.setFormatter(formatter)
    handler.addFilter(ContactRedactingFilter())

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers = [handler]

    # Streamlit's watcher is chatty at DEBUG
    logging.getLogger("watchdog").setLevel(logging.WARNING)
