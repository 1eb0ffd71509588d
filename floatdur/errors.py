"""Exceptions raised while rendering intervals."""


class FormatWriteError(Exception):
    """Raised when a text sink refuses a formatted interval.

    The underlying failure is kept on ``wrapped`` (and as ``__cause__``)
    without being inspected.
    """

    def __init__(self, message: str, wrapped: Exception | None = None) -> None:
        super().__init__(message)
        self.wrapped = wrapped
