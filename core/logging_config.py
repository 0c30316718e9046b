import logging

from core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
APP_LOGGERS = ("core", "services", "repositories", "routers", "main")


def configure_logging(level: int | None = None) -> None:
    """Set up root output once and apply ``level`` (or ``LOG_LEVEL``) to the app's loggers."""
    # no-op when the root logger already has handlers (uvicorn, pytest)
    logging.basicConfig(format=LOG_FORMAT)
    resolved = settings.log_level if level is None else level
    for name in APP_LOGGERS:
        logging.getLogger(name).setLevel(resolved)
