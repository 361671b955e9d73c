import logging
import sys

# Transport libraries that log every request at INFO.
_TRANSPORT_LOGGERS = ("httpx", "httpcore", "openai")


class Log:
    """Centralized logging for the resume analyzer."""

    _logger: logging.Logger = logging.getLogger("resume_analyzer")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Set the level, attach a single stdout handler, quiet transport logs.

        HTTP client and SDK loggers stay at WARNING unless DEBUG is requested,
        so request lines do not drown the analysis log.
        """
        level = log_level.upper()
        cls._logger.setLevel(level)
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)
        transport_level = logging.DEBUG if level == "DEBUG" else logging.WARNING
        for name in _TRANSPORT_LOGGERS:
            logging.getLogger(name).setLevel(transport_level)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        cls._logger.error(message, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        cls._logger.debug(message, extra=kwargs)
