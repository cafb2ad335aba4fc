from typing import Protocol


class LoggerProtocol(Protocol):
    """
    Observer port for operational events.

    Events are short snake_case names with key/value context. Calls are
    fire-and-forget; implementations must not raise.
    """

    def info(self, event: str, **fields: object) -> None: ...

    def error(self, exc: BaseException, event: str, **fields: object) -> None: ...
