import logging
import sys

LOGGER_NAME = "bgeraser"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class Log:
    """Process-wide logging facade.

    Keyword arguments are rendered as sorted `key=value` pairs after the
    message, so call sites can attach context such as a locator or strategy
    without formatting it into the text.
    """

    _logger: logging.Logger = logging.getLogger(LOGGER_NAME)

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Set the level and attach a single stdout handler."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            cls._logger.addHandler(handler)

    @staticmethod
    def _render(message: str, context: dict[str, object]) -> str:
        if not context:
            return message
        pairs = " ".join(f"{key}={context[key]}" for key in sorted(context))
        return f"{message} {pairs}"

    @classmethod
    def debug(cls, message: str, **context: object) -> None:
        cls._logger.debug(cls._render(message, context))

    @classmethod
    def info(cls, message: str, **context: object) -> None:
        cls._logger.info(cls._render(message, context))

    @classmethod
    def warning(cls, message: str, **context: object) -> None:
        cls._logger.warning(cls._render(message, context))

    @classmethod
    def error(cls, message: str, **context: object) -> None:
        cls._logger.error(cls._render(message, context))

    @classmethod
    def exception(cls, message: str, **context: object) -> None:
        """Log at error level with the active exception's traceback."""
        cls._logger.exception(cls._render(message, context))
