class ForecastError(RuntimeError):
    """Base class for failures while talking to the weather provider.

    ``context`` names the pipeline stage that failed and is prepended to the
    message, so the error type survives while callers get a readable string.
    """

    def __init__(self, message: str, *, context: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        if self.context:
            return f"{self.context}: {self.message}"
        return self.message


class NetworkError(ForecastError):
    pass


class UpstreamError(ForecastError):
    def __init__(self, message: str, *, status_code: int, context: str | None = None) -> None:
        super().__init__(message, context=context)
        self.status_code = status_code


class DecodeError(ForecastError):
    pass


class NotFoundError(ForecastError):
    pass
