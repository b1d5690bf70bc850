import logging
import sys

from restoadmin.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging() -> logging.Logger:
    """
    Uygulama logger'ını bir kez kurar.
    Tekrar çağrılırsa handler eklemez.
    """
    app_logger = logging.getLogger("restoadmin")
    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    app_logger.setLevel(level)

    if not app_logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        app_logger.addHandler(handler)

    return app_logger


logger = setup_logging()
