"""Errors raised by the elvis package."""


class ElvisError(Exception):
    """Base error; raised directly for custom failures carrying a message."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class FunctionError(ElvisError):
    """A broken function was passed in."""


class DeserializeHtmlError(ElvisError):
    """Plain HTML text could not be deserialized."""


class RouterError(ElvisError):
    """Routing to a page failed."""