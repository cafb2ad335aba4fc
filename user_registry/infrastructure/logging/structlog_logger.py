"""structlog adapter for the application logger port."""

import structlog


class StructlogLogger:
    """Forwards operational events to a structlog logger."""

    def __init__(self, name: str) -> None:
        self._logger = structlog.get_logger(name)

    def info(self, event: str, **fields: object) -> None:
        self._logger.info(event, **fields)

    def error(self, exc: BaseException, event: str, **fields: object) -> None:
        self._logger.error(event, exc_info=exc, **fields)
