"""Error definitions for objkit."""


class ObjkitError(Exception):
    """Base class for objkit errors."""


class InvalidArgumentError(ObjkitError, ValueError):
    """Raised when a required argument is ``None``.

    Always a caller bug; there is nothing to retry.
    """

    def __init__(
        self, message: str | None = None, *, argument: str | None = None
    ) -> None:
        if message is None:
            message = (
                f"Argument '{argument}' must not be None"
                if argument is not None
                else "Argument must not be None"
            )
        super().__init__(message)
        self.argument = argument
