import logging
import os
from logging.handlers import RotatingFileHandler

from .config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(log_dir: str | None = None, level: str | None = None) -> None:
    """Configure root logging with a console handler and a rotating file handler.

    Safe to call more than once; handlers are only attached the first time.
    """
    root = logging.getLogger()
    root.setLevel(level or settings.LOG_LEVEL)

    if getattr(root, "_blog_api_configured", False):
        return

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    log_dir = log_dir or settings.LOG_DIR
    os.makedirs(log_dir, exist_ok=True)
    file_handler = RotatingFileHandler(
        os.path.join(log_dir, "app.log"), maxBytes=10 * 1024 * 1024, backupCount=5
    )
    file_handler.setFormatter(formatter)
    root.addHandler(file_handler)

    root._blog_api_configured = True  # type: ignore[attr-defined]
