import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Server loggers that should share the service's format and level.
SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


class Log:
    """Service-wide logging facade over the ``adreview`` logger."""

    _logger: logging.Logger = logging.getLogger("adreview")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Apply ``log_level`` to the service and server loggers.

        A single stdout handler is attached to the service logger, so calling
        this once per app instance is safe.
        """
        level = log_level.upper()
        cls._logger.setLevel(level)
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            cls._logger.addHandler(handler)
        for name in SERVER_LOGGERS:
            logging.getLogger(name).setLevel(level)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        cls._logger.error(message, extra=kwargs)

    @classmethod
    def exception(cls, message: str, **kwargs: object) -> None:
        """Log at ERROR level with the active exception's traceback."""
        cls._logger.exception(message, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        cls._logger.debug(message, extra=kwargs)
